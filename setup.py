import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="lru-engine",
    version="1.0.0",
    author="lru-engine contributors",
    description="A thread-safe, fixed-capacity LRU cache",
    long_description=long_description,
    long_description_content_type='text/x-rst',
    packages=setuptools.find_packages(exclude=["tests", "tests.*", "docs"]),
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme", "sphinx-autodoc-typehints"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    keywords=['lru', 'cache', 'lru-cache', 'thread-safe', 'memoize'],
)
