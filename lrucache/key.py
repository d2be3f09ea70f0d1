from typing import Any


def _freeze(param: Any):
    if isinstance(param, (tuple, list)):
        return type(param).__name__, tuple(map(_freeze, param))
    if isinstance(param, dict):
        return 'dict', tuple(sorted((repr(k), _freeze(v)) for k, v in param.items()))
    if isinstance(param, (set, frozenset)):
        return 'set', tuple(sorted(map(repr, param)))
    try:
        hash(param)
    except TypeError:
        if hasattr(param, '__dict__'):
            return type(param).__name__, _freeze(vars(param))
        return type(param).__name__, repr(param)
    return param


class Key:
    """Hashable key built from a call's positional and keyword arguments.

    Keyword order does not matter. Unhashable containers are turned into
    nested tuples so that ``f([1, 2])`` can be cached.
    """

    __slots__ = ('args', 'kwargs', '_frozen')

    def __init__(self, args=(), kwargs=None):
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self._frozen = (
            _freeze(self.args),
            tuple(sorted((k, _freeze(v)) for k, v in self.kwargs.items())),
        )

    def __eq__(self, obj):
        if not isinstance(obj, Key):
            return NotImplemented
        return self._frozen == obj._frozen

    def __hash__(self):
        return hash(self._frozen)

    def __repr__(self):
        return 'Key(args={!r}, kwargs={!r})'.format(self.args, self.kwargs)
