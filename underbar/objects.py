"""Shallow merge helpers for mappings."""

from typing import Any, MutableMapping, Optional

from underbar.iteration import each


def extend(target: MutableMapping, *sources: Optional[MutableMapping]) -> MutableMapping:
    """Copy every key of every source onto ``target``, later sources winning.

    Example:
        extend({"a": 1}, {"a": 2, "b": 3})  # {"a": 2, "b": 3}
    """
    def _copy(source, _index, _sources):
        if not source:
            return
        for key in source:
            target[key] = source[key]

    each(list(sources), _copy)
    return target


def defaults(target: MutableMapping, *sources: Optional[MutableMapping]) -> MutableMapping:
    """Like ``extend`` but never overwrites a key ``target`` already has."""
    def _fill(source, _index, _sources):
        if not source:
            return
        for key in source:
            if key not in target:
                target[key] = source[key]

    each(list(sources), _fill)
    return target
