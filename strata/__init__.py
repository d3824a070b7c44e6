"""
Strata - Composable asynchronous key/value stores.

Submodules:
    strata.store - Store contract, terminal stores and extensions
"""

from . import store
from .store import (
    Store,
    MemoryStore,
    DiffStore,
    AutoObjectStore,
    Cascading,
    DelimitedKey,
    MissLookup,
    PatternProxy,
    connect,
)

__all__ = [
    # Submodules
    "store",
    # Terminal stores
    "Store",
    "MemoryStore",
    "DiffStore",
    # Extensions
    "AutoObjectStore",
    "Cascading",
    "DelimitedKey",
    "MissLookup",
    "PatternProxy",
    # Construction
    "connect",
]

__version__ = "0.1.0"
