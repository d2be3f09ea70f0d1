import os
import sys
sys.path.insert(0, os.path.abspath('..'))

project = 'lru-engine'
copyright = '2026, lru-engine contributors'
author = 'lru-engine contributors'
release = '1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx_autodoc_typehints',
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']

autodoc_typehints = 'description'
autodoc_member_order = 'bysource'
