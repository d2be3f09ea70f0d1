from typing import Any, Hashable, Protocol, runtime_checkable

DEFAULT_CAPACITY = 16


class CacheError(Exception):
    """Base class for internal cache faults."""


class InvalidItemTypeError(CacheError):
    """A lookup handle resolved to something that is not an entry."""

    def __init__(self, message="cache(lru): invalid item type."):
        super().__init__(message)


class FatalStateError(CacheError):
    """The recency list and its declared length went out of sync."""

    def __init__(self, message="cache(lru): fatal state."):
        super().__init__(message)


@runtime_checkable
class CacheInterface(Protocol):
    """Operations every cache in this package conforms to."""

    def set(self, key: Hashable, value: Any) -> bool:
        ...

    def get(self, key: Hashable, default: Any = None) -> Any:
        ...

    def read(self, key: Hashable, default: Any = None) -> Any:
        ...

    def remove(self, key: Hashable) -> bool:
        ...

    def purge(self) -> None:
        ...

    def len(self) -> int:
        ...


@runtime_checkable
class CacheItemInterface(Protocol):
    """Accessors for individual cache records."""

    def k(self) -> Hashable:
        ...

    def v(self) -> Any:
        ...

    def c(self) -> int:
        ...
