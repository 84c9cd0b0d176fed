"""
underbar: collection helpers and function decorators.

Every public helper is reachable from this namespace, e.g.
``underbar.each``, ``underbar.reduce_``, ``underbar.throttle``.
"""

from underbar.models import UnderbarSettings, get_settings
from underbar.utils import setup_logging
from underbar.iteration import ABSENT, each, identity, iter_pairs
from underbar.transforms import (
    contains,
    every,
    filter_,
    find,
    first,
    group_by,
    index_of,
    invoke,
    last,
    map_,
    pluck,
    reduce_,
    reject,
    some,
    uniq,
)
from underbar.objects import defaults, extend
from underbar.functions import delay, memoize, once, throttle
from underbar.advanced import difference, flatten, intersection, shuffle, sort_by, zip_
from underbar.chain import Chain, chain

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Chain",
    "UnderbarSettings",
    "chain",
    "contains",
    "defaults",
    "delay",
    "difference",
    "each",
    "every",
    "extend",
    "filter_",
    "find",
    "first",
    "flatten",
    "get_settings",
    "group_by",
    "identity",
    "index_of",
    "intersection",
    "invoke",
    "iter_pairs",
    "last",
    "map_",
    "memoize",
    "once",
    "pluck",
    "reduce_",
    "reject",
    "setup_logging",
    "shuffle",
    "some",
    "sort_by",
    "throttle",
    "uniq",
    "zip_",
]
