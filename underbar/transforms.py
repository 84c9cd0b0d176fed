"""
Collection transforms derived from ``each`` and ``reduce_``.

Predicates and transforms receive the element value only. ``filter_`` and
``reject`` test for ``is True`` rather than truthiness, so together they
partition any input.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from underbar.iteration import ABSENT, each, identity, includes, iter_values, same
from underbar.utils import is_mapping

logger = logging.getLogger(__name__)


def first(sequence: Sequence, n: Optional[int] = None):
    """First element, or a list of the first ``n`` elements."""
    if n is None:
        return sequence[0] if len(sequence) else None
    return list(sequence[:max(n, 0)])


def last(sequence: Sequence, n: Optional[int] = None):
    """Last element, or a list of the last ``n`` elements. Never mutates."""
    if n is None:
        return sequence[-1] if len(sequence) else None
    if n <= 0:
        return []
    return list(sequence[-n:])


def index_of(sequence: Sequence, target: Any) -> int:
    result = -1

    def _check(item, index, _):
        nonlocal result
        if result == -1 and same(item, target):
            result = index

    each(sequence, _check)
    return result


def filter_(collection: Any, predicate: Callable[[Any], Any]) -> List[Any]:
    """Values for which ``predicate(value) is True``."""
    kept = []

    def _keep(item, _key, _collection):
        if predicate(item) is True:
            kept.append(item)

    each(collection, _keep)
    return kept


def reject(collection: Any, predicate: Callable[[Any], Any]) -> List[Any]:
    """Values for which ``predicate(value)`` is anything but ``True``."""
    return filter_(collection, lambda item: predicate(item) is not True)


def uniq(sequence: Any) -> List[Any]:
    """Drop repeats, keeping first occurrences in order.

    Membership is strict equality over a list, so unhashable elements work
    and ``1``, ``1.0`` and ``True`` all survive.
    """
    seen = []

    def _add(item, _key, _collection):
        if not includes(seen, item):
            seen.append(item)

    each(sequence, _add)
    return seen


def map_(collection: Any, transform: Callable[[Any], Any]) -> List[Any]:
    results = []
    each(collection, lambda item, _key, _collection: results.append(transform(item)))
    return results


def pluck(records: Any, key: Any) -> List[Any]:
    """``record[key]`` for every record, e.g. every person's age."""
    return map_(records, lambda record: record[key])


def invoke(collection: Any, method_or_name: Union[Callable, str], args: Sequence = ()) -> List[Any]:
    """Call a method on every element and collect the results.

    A callable is invoked as ``method(element, *args)``; a name is resolved
    on each element with ``getattr`` and called with ``*args``.
    """
    def _call(element):
        if callable(method_or_name):
            return method_or_name(element, *args)
        method = getattr(element, method_or_name, None)
        if not callable(method):
            raise TypeError(
                f"{type(element).__name__!r} object has no callable member {method_or_name!r}"
            )
        return method(*args)

    return map_(collection, _call)


def reduce_(collection: Any, combine: Callable[[Any, Any], Any], initial: Any = ABSENT) -> Any:
    """Fold left with ``combine(accumulator, value)``.

    Without ``initial`` the first element seeds the accumulator and folding
    starts from the second one; an empty collection then raises TypeError.
    """
    values = iter_values(collection)
    accumulator = initial
    if accumulator is ABSENT:
        accumulator = next(values, ABSENT)
        if accumulator is ABSENT:
            raise TypeError("reduce_() of empty collection with no initial value")
    for item in values:
        accumulator = combine(accumulator, item)
    return accumulator


def contains(collection: Any, target: Any) -> bool:
    return reduce_(collection, lambda found, item: found or same(item, target), False)


def every(collection: Any, predicate: Optional[Callable[[Any], Any]] = None) -> bool:
    """True when ``predicate`` is truthy for all values (vacuously for none)."""
    predicate = predicate or identity
    return reduce_(collection, lambda ok, item: ok and bool(predicate(item)), True)


def some(collection: Any, predicate: Optional[Callable[[Any], Any]] = None) -> bool:
    predicate = predicate or identity
    return not every(collection, lambda item: not predicate(item))


def find(collection: Any, predicate: Callable[[Any], Any]) -> Any:
    """First value for which ``predicate`` is truthy, or None."""
    for item in iter_values(collection):
        if predicate(item):
            return item
    return None


def group_by(collection: Any, key: Union[Callable[[Any], Any], str]) -> Dict[Any, List[Any]]:
    """Group values by ``key(value)``, or by the named field when ``key`` is a string."""
    if callable(key):
        key_fn = key
    else:
        key_fn = lambda item: item[key] if is_mapping(item) else getattr(item, key)

    groups = {}
    for item in iter_values(collection):
        group = key_fn(item)
        if group not in groups:
            groups[group] = []
        groups[group].append(item)
    return groups
