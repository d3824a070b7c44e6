"""Behavioral extensions for strata.store.

Each extension wraps another store and may itself be wrapped, so any
number of them can be layered over a terminal store. Ordering matters:
the outermost layer sees a request first.
"""

from .base import StoreDecorator
from .auto_object import AutoObjectStore
from .cascading import Cascading
from .delimited import DelimitedKey
from .miss_lookup import MissLookup
from .pattern import PatternMatch, PatternProxy

__all__ = [
    "StoreDecorator",
    "AutoObjectStore",
    "Cascading",
    "DelimitedKey",
    "MissLookup",
    "PatternMatch",
    "PatternProxy",
]
