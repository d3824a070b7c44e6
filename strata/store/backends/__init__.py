"""Terminal stores for strata.store."""

from .base import Store
from .memory import MemoryStore
from .diff import DiffStore

__all__ = [
    "Store",
    "MemoryStore",
    "DiffStore",
]
