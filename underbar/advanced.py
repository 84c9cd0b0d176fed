"""
Advanced collection operations: shuffling, sorting, zipping, flattening and
set-like comparisons between sequences. None of them mutate their inputs.
"""

import random
import logging
from itertools import zip_longest
from typing import Any, Callable, List, Optional, Sequence, Union

from underbar.iteration import ABSENT, includes, iter_values
from underbar.models import get_settings
from underbar.transforms import uniq
from underbar.utils import is_mapping, is_sequence

logger = logging.getLogger(__name__)


_default_rng: Optional[random.Random] = None


def default_rng() -> random.Random:
    """RNG used when ``shuffle`` gets none; seeded from settings if configured."""
    global _default_rng
    if _default_rng is None:
        seed = get_settings().shuffle_seed
        if seed is not None:
            logger.info(f"Seeding default shuffle RNG with {seed}")
        _default_rng = random.Random(seed)
    return _default_rng


def reset_default_rng() -> None:
    global _default_rng
    _default_rng = None


def shuffle(sequence: Sequence, rng: Optional[random.Random] = None) -> List[Any]:
    """Return a uniformly shuffled copy (Fisher-Yates)."""
    rng = rng or default_rng()
    shuffled = list(iter_values(sequence))
    for index in range(len(shuffled) - 1, 0, -1):
        swap = rng.randint(0, index)
        shuffled[index], shuffled[swap] = shuffled[swap], shuffled[index]
    return shuffled


def sort_by(collection: Any, iterator_or_key: Union[Callable[[Any], Any], str]) -> List[Any]:
    """Stable ascending sort by ``iterator(value)`` or by a named field.

    A name reads ``item[name]`` from mappings and ``getattr(item, name)``
    from anything else, e.g. ``sort_by(people, "age")``.
    """
    if callable(iterator_or_key):
        key_fn = iterator_or_key
    elif isinstance(iterator_or_key, str):
        name = iterator_or_key
        key_fn = lambda item: item[name] if is_mapping(item) else getattr(item, name)
    else:
        raise TypeError(f"sort_by needs a callable or a field name, got {type(iterator_or_key).__name__}")
    return sorted(iter_values(collection), key=key_fn)


def zip_(*sequences: Sequence) -> List[List[Any]]:
    """Group elements by index, padding shorter inputs with ``ABSENT``.

    Example:
        zip_(['a', 'b', 'c'], [1, 2])  # [['a', 1], ['b', 2], ['c', ABSENT]]
    """
    return [list(group) for group in zip_longest(*sequences, fillvalue=ABSENT)]


def flatten(nested: Sequence) -> List[Any]:
    """Flatten arbitrarily nested sequences depth-first, left to right.

    Strings and other non-sequences are values, never split apart.
    """
    flat = []
    for item in iter_values(nested):
        if is_sequence(item):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


def intersection(*sequences: Sequence) -> List[Any]:
    """Unique elements of the first sequence that appear in every other one."""
    if not sequences:
        return []
    head, rest = sequences[0], sequences[1:]
    return [item for item in uniq(head) if all(includes(other, item) for other in rest)]


def difference(first: Sequence, *others: Sequence) -> List[Any]:
    """Elements of ``first``, in order, that appear in none of ``others``."""
    return [item for item in iter_values(first) if not any(includes(other, item) for other in others)]
