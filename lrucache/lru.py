import logging
import threading
from typing import Any, Dict, Hashable, List, Tuple

from .base import (
    DEFAULT_CAPACITY,
    FatalStateError,
    InvalidItemTypeError,
)
from .entry import Entry
from .ordered_index import OrderedIndex

logger = logging.getLogger(__name__)


class LRU:
    """Fixed capacity cache with least-recently-used eviction.

    A ``dict`` maps each key to its handle in an :class:`OrderedIndex`
    holding the entries in recency order. Both are only ever changed
    together while holding ``self._lock`` (an RLock, so the engine is safe
    to share between threads and between tasks of one event loop).

    The requested capacity is reduced by one to obtain the slot budget;
    a budget ``<= 0`` falls back to :data:`DEFAULT_CAPACITY`. Eviction runs
    before an insert when the entry count exceeds the budget, so a cache
    built with ``capacity=N`` (``N > 1``) holds at most ``N`` entries.

    :param capacity: requested number of entries
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError('capacity must be an int, got {!r}'.format(capacity))
        self._capacity = capacity - 1
        if self._capacity <= 0:
            logger.debug(
                'capacity %d too small, using default %d', capacity, DEFAULT_CAPACITY
            )
            self._capacity = DEFAULT_CAPACITY
        self._count = 0
        self._index = OrderedIndex()
        self._lookup: Dict[Hashable, int] = {}
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        """Effective slot budget."""
        return self._capacity

    @property
    def count(self) -> int:
        """Global touch counter, bumped by every ``set`` and ``get``."""
        return self._count

    def set(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key`` and mark it most recently used.

        :return: ``True`` when ``key`` was not cached before
        :raises InvalidItemTypeError: the key's handle does not resolve to
            an :class:`Entry`
        """
        with self._lock:
            return self._set(key, value)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it most recently used.

        A miss is not an error: ``default`` is returned.

        :raises InvalidItemTypeError: the key's handle does not resolve to
            an :class:`Entry`
        """
        with self._lock:
            entry = self._get(key)
            if entry is None:
                return default
            return entry.value

    def read(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` without touching counters or order."""
        with self._lock:
            handle = self._lookup.get(key)
            if handle is None:
                return default
            return self._resolve(handle).value

    def remove(self, key: Hashable) -> bool:
        with self._lock:
            handle = self._lookup.pop(key, None)
            if handle is None:
                return False
            self._index.remove(handle)
            return True

    def purge(self) -> None:
        """Drop every entry and reset the touch counter. Capacity is kept."""
        with self._lock:
            logger.debug('purging %d entries', len(self._index))
            self._index.clear()
            self._lookup.clear()
            self._count = 0

    def len(self) -> int:
        with self._lock:
            return len(self._index)

    def __len__(self):
        return self.len()

    def __contains__(self, key):
        with self._lock:
            return key in self._lookup

    def keys(self) -> List[Hashable]:
        """Snapshot of the cached keys, most recently used first."""
        with self._lock:
            return [entry.key for entry in self._index]

    def entries(self) -> List[Tuple[Hashable, Any, int]]:
        """Snapshot of ``(key, value, access_count)``, most recently used first."""
        with self._lock:
            return [(e.key, e.value, e.access_count) for e in self._index]

    def dump(self) -> List[Entry]:
        """Remove every entry and return them, most recently used first.

        The touch counter is left as is.

        :raises FatalStateError: the recency list ran dry before its
            declared length was reached
        """
        with self._lock:
            cnt = len(self._index)
            items = []
            for _ in range(cnt):
                entry = self._index.pop_front()
                if entry is None:
                    raise FatalStateError()
                self._lookup.pop(entry.key, None)
                items.append(entry)
            logger.debug('dumped %d entries', len(items))
            return items

    def __repr__(self):
        return '{}(capacity={}, len={})'.format(
            type(self).__name__, self._capacity, len(self._index)
        )

    # Everything below expects self._lock to be held.

    def _set(self, key, value):
        handle = self._lookup.get(key)
        self._count += 1
        if handle is None:
            if len(self._index) > self._capacity:
                self._evict()
            entry = Entry(key, value, self._count)
            self._lookup[key] = self._index.push_front(entry)
            return True
        entry = self._resolve(handle)
        if len(self._index) > self._capacity:
            self._evict()
            if key not in self._lookup:
                # the updated entry was the tail and went with the eviction
                return False
        entry.access_count += 1
        entry.value = value
        self._index.move_to_front(handle)
        return False

    def _get(self, key):
        handle = self._lookup.get(key)
        self._count += 1
        if handle is None:
            return None
        entry = self._resolve(handle)
        entry.access_count += 1
        self._index.move_to_front(handle)
        return entry

    def _resolve(self, handle):
        entry = self._index.item(handle)
        if not isinstance(entry, Entry):
            raise InvalidItemTypeError()
        return entry

    def _evict(self):
        entry = self._index.pop_back()
        if entry is None:
            raise FatalStateError('cache(lru): fatal state. evicting from empty cache.')
        if not isinstance(entry, Entry):
            raise InvalidItemTypeError()
        del self._lookup[entry.key]
        logger.debug('evicted %r', entry.key)
        entry.clear()
