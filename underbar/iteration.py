"""
The iteration primitive every other collection helper is built on.

A collection is either an ordered sequence (traversed by index) or a
mapping (traversed by key). ``iter_pairs`` turns both shapes into one
stream of ``(key, value)`` pairs; ``each`` drives a callback over it.
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterator, Tuple

from underbar.utils import is_mapping, is_sequence

logger = logging.getLogger(__name__)


class _Marker(Enum):
    """Placeholder values that can never be confused with data."""
    ABSENT = "absent"

    def __repr__(self):
        return f"<{self.name}>"

    def __bool__(self):
        return False


# "No value at this position" (zip_ padding, reduce_ with no seed)
ABSENT = _Marker.ABSENT


def identity(value: Any) -> Any:
    """Return ``value`` unchanged; the default predicate."""
    return value


def same(a: Any, b: Any) -> bool:
    """Strict equality: equal values of the same type, so ``1``, ``1.0`` and ``True`` differ."""
    return type(a) is type(b) and a == b


def includes(collection: Any, target: Any) -> bool:
    """True when some value of ``collection`` is ``same`` as ``target``."""
    return any(same(item, target) for item in iter_values(collection))


def iter_pairs(collection: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield ``(index, value)`` for sequences and ``(key, value)`` for mappings.

    Anything that is neither yields nothing.
    """
    if is_sequence(collection):
        for index in range(len(collection)):
            yield index, collection[index]
    elif is_mapping(collection):
        for key in list(collection):
            yield key, collection[key]
    else:
        logger.debug(f"Not a collection, nothing to traverse: {type(collection).__name__}")


def iter_values(collection: Any) -> Iterator[Any]:
    for _, value in iter_pairs(collection):
        yield value


def each(collection: Any, iterator: Callable[[Any, Any, Any], Any]) -> None:
    """Call ``iterator(value, index_or_key, collection)`` for every element.

    Sequences go in index order, mappings in key order. Empty collections
    and non-collections result in no calls.
    """
    for key, value in iter_pairs(collection):
        iterator(value, key, collection)
