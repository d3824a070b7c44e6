"""Composable asynchronous key/value stores.

A terminal store holds the data and any number of extensions can be
layered over it; every layer implements the same contract (`add`, `get`,
`clear`, `reduce` and `populate`), so callers never depend on concrete
types.

Quick Start:
    from strata.store import MemoryStore, MissLookup, Cascading

    async def load_program(program_id):
        ...

    programs = MemoryStore().use(MissLookup, load_program)
    cache = MemoryStore().use(Cascading)
    await cache.add("program", programs)

    await programs.get("auto")  # looked up once, then cached
    await cache.clear()         # reload everything on demand

Terminal stores:
    - MemoryStore: In-memory mapping
    - DiffStore: Diffs staged values against committed ones

Extensions:
    - Cascading: Store of stores; clear cascades to each
    - DelimitedKey: "a.b.c" keys address nested stores
    - PatternProxy: Route keys to sub-stores by regular expression
    - AutoObjectStore: Turn dict values into sub-stores on read
    - MissLookup: Look up and cache misses, without stampeding

Configuration:
    - connect(): Create a terminal store from a URL
    - ConfLoader: Populate a store from a JSON file
"""

from .core import connect
from .config import ConfLoader
from .backends import Store, MemoryStore, DiffStore
from .extensions import (
    StoreDecorator,
    AutoObjectStore,
    Cascading,
    DelimitedKey,
    MissLookup,
    PatternMatch,
    PatternProxy,
)
from .values import ValueKind, kind_of, is_plain_mapping
from .exceptions import (
    StoreError,
    ConfigurationError,
    NotFoundError,
    PatternMismatchError,
    ContractViolationError,
)

__all__ = [
    # Main API
    "Store",
    "connect",
    "ConfLoader",
    # Terminal stores
    "MemoryStore",
    "DiffStore",
    # Extensions
    "StoreDecorator",
    "AutoObjectStore",
    "Cascading",
    "DelimitedKey",
    "MissLookup",
    "PatternMatch",
    "PatternProxy",
    # Values
    "ValueKind",
    "kind_of",
    "is_plain_mapping",
    # Exceptions
    "StoreError",
    "ConfigurationError",
    "NotFoundError",
    "PatternMismatchError",
    "ContractViolationError",
]
