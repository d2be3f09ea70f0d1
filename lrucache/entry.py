from typing import Any, Hashable


class Entry:
    """A single cache record.

    :param key: hashable identity of the record
    :param value: stored payload, kept by reference
    :param access_count: touch counter value at creation; incremented on
        every later hit or update
    """

    __slots__ = ('key', 'value', 'access_count')

    def __init__(self, key: Hashable, value: Any, access_count: int = 0):
        self.key = key
        self.value = value
        self.access_count = access_count

    def k(self):
        return self.key

    def v(self):
        return self.value

    def c(self):
        return self.access_count

    def clear(self):
        # drop references so evicted payloads can be collected
        self.key = None
        self.value = None

    def __repr__(self):
        return 'Entry(key={!r}, value={!r}, access_count={})'.format(
            self.key, self.value, self.access_count
        )
