"""In-memory store."""

from typing import Any, Callable, Dict

from ..exceptions import NotFoundError
from .base import Store, T


class MemoryStore(Store):
    """In-memory key/value store.

    Data lives for as long as the instance (or until `clear`).

    Example:
        store = MemoryStore()
        await asyncio.gather(store.add("foo", "bar"), store.add("baz", "quux"))
        await store.get("foo")  # "bar"

        await store.clear()
        await store.get("foo")  # raises NotFoundError
    """

    def __init__(self):
        self._data: Dict[str, Any] = {}

    async def add(self, key: str, value: Any) -> "MemoryStore":
        """Store or replace the value under key."""
        self._data[key] = value
        return self

    async def get(self, key: str) -> Any:
        """Retrieve value by key."""
        try:
            return self._data[key]
        except (KeyError, TypeError):
            # unhashable keys can't be present either
            raise NotFoundError(key) from None

    async def clear(self) -> "MemoryStore":
        """Remove every item."""
        self._data = {}
        return self

    async def reduce(self, fold: Callable[[T, Any, str], T], initial: T) -> T:
        """Fold over all stored values."""
        accum = initial
        for key, value in list(self._data.items()):
            accum = fold(accum, value, key)
        return accum

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
