from .base import (
    DEFAULT_CAPACITY,
    CacheError,
    CacheInterface,
    CacheItemInterface,
    FatalStateError,
    InvalidItemTypeError,
)
from .decorator import LRUCached
from .entry import Entry
from .key import Key
from .lru import LRU
from .ordered_index import OrderedIndex

__all__ = [
    'DEFAULT_CAPACITY',
    'CacheError',
    'CacheInterface',
    'CacheItemInterface',
    'Entry',
    'FatalStateError',
    'InvalidItemTypeError',
    'Key',
    'LRU',
    'LRUCached',
    'OrderedIndex',
]
