from typing import Any, Iterator, List, Optional

from .base import FatalStateError

NIL = -1


class OrderedIndex:
    """Doubly linked recency list stored in an arena of slots.

    Items live in parallel slot arrays linked by slot index rather than by
    node objects. A handle is the slot index of an item; it stays valid
    until the item is removed, after which the slot goes onto a free list
    and is reused by the next push. The head is the most recently used
    item, the tail the least recently used one.

    Not thread safe on its own; :class:`lrucache.lru.LRU` serializes access.
    """

    def __init__(self):
        self._items: List[Any] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._head = NIL
        self._tail = NIL
        self._len = 0

    def __len__(self):
        return self._len

    def __iter__(self) -> Iterator[Any]:
        slot = self._head
        while slot != NIL:
            yield self._items[slot]
            slot = self._next[slot]

    @property
    def slots(self) -> int:
        """Number of slots allocated so far, live or free."""
        return len(self._items)

    def front(self) -> int:
        return self._head

    def back(self) -> int:
        return self._tail

    def item(self, handle: int) -> Optional[Any]:
        """Item stored at ``handle``, ``None`` for free or unknown slots."""
        if 0 <= handle < len(self._items):
            return self._items[handle]
        return None

    def push_front(self, item: Any) -> int:
        if self._free:
            slot = self._free.pop()
            self._items[slot] = item
        else:
            slot = len(self._items)
            self._items.append(item)
            self._prev.append(NIL)
            self._next.append(NIL)
        self._link_front(slot)
        self._len += 1
        return slot

    def move_to_front(self, handle: int) -> None:
        self._check(handle)
        if handle == self._head:
            return
        self._unlink(handle)
        self._link_front(handle)

    def remove(self, handle: int) -> Any:
        self._check(handle)
        return self._release(handle)

    def pop_back(self) -> Optional[Any]:
        """Remove and return the tail item, or ``None`` when empty."""
        if self._tail == NIL:
            return None
        return self._release(self._tail)

    def pop_front(self) -> Optional[Any]:
        """Remove and return the head item, or ``None`` when empty."""
        if self._head == NIL:
            return None
        return self._release(self._head)

    def clear(self) -> None:
        self._items.clear()
        self._prev.clear()
        self._next.clear()
        self._free.clear()
        self._head = NIL
        self._tail = NIL
        self._len = 0

    def _check(self, handle):
        if not 0 <= handle < len(self._items) or self._items[handle] is None:
            raise FatalStateError(
                'cache(lru): fatal state. stale handle {}.'.format(handle)
            )

    def _link_front(self, slot):
        self._prev[slot] = NIL
        self._next[slot] = self._head
        if self._head != NIL:
            self._prev[self._head] = slot
        else:
            self._tail = slot
        self._head = slot

    def _unlink(self, slot):
        prev, nxt = self._prev[slot], self._next[slot]
        if prev != NIL:
            self._next[prev] = nxt
        else:
            self._head = nxt
        if nxt != NIL:
            self._prev[nxt] = prev
        else:
            self._tail = prev
        self._prev[slot] = NIL
        self._next[slot] = NIL

    def _release(self, slot):
        self._unlink(slot)
        item = self._items[slot]
        self._items[slot] = None
        self._free.append(slot)
        self._len -= 1
        return item
