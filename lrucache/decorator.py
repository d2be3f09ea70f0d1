import functools
import inspect

from .key import Key
from .lru import LRU

_MISSING = object()


class LRUCached:
    """Memoize a function's results in an :class:`LRU`.

    Works on plain and ``async`` functions::

        @LRUCached(capacity=256)
        async def fetch(user_id):
            ...

    The wrapper accepts ``use_cache=False`` to skip the lookup and refresh
    the stored result, and carries ``cache_clear()``,
    ``invalidate_cache(*args, **kwargs)`` and ``cache_info()``.
    """

    def __init__(self, capacity=128, skip_args=0):
        """
        :param capacity: requested number of cached results
        :param skip_args: Use `1` to skip first arg of func in determining cache key
        """
        self.lru = LRU(capacity)
        self.skip_args = skip_args

    def cache_clear(self):
        self.lru.purge()

    def invalidate_cache(self, *args, **kwargs):
        return self.lru.remove(self._key(args, kwargs))

    def cache_info(self):
        return {'size': self.lru.len(), 'capacity': self.lru.capacity}

    def _key(self, args, kwargs):
        return Key(args[self.skip_args:], kwargs)

    def __call__(self, func):
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def wrapper(*args, use_cache=True, **kwargs):
                key = self._key(args, kwargs)
                if use_cache:
                    value = self.lru.get(key, _MISSING)
                    if value is not _MISSING:
                        return value
                value = await func(*args, **kwargs)
                self.lru.set(key, value)
                return value
        else:
            @functools.wraps(func)
            def wrapper(*args, use_cache=True, **kwargs):
                key = self._key(args, kwargs)
                if use_cache:
                    value = self.lru.get(key, _MISSING)
                    if value is not _MISSING:
                        return value
                value = func(*args, **kwargs)
                self.lru.set(key, value)
                return value

        wrapper.cache_clear = self.cache_clear
        wrapper.invalidate_cache = self.invalidate_cache
        wrapper.cache_info = self.cache_info
        wrapper.lru = self.lru
        return wrapper
