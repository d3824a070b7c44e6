"""Add and retrieve items from (possibly) nested stores."""

from typing import Any, List

from ..backends.base import Store
from ..exceptions import ConfigurationError, ContractViolationError
from .base import StoreDecorator


class DelimitedKey(StoreDecorator):
    """Address nested stores with delimited keys.

    A key is split on the delimiter; every segment but the last names a
    nested Store, and the last names the item within the innermost one.

    Example:
        outer = MemoryStore().use(DelimitedKey, ".")
        middle = MemoryStore()
        inner = MemoryStore()

        await inner.add("foo", "inner value")
        await middle.add("inner", inner)
        await outer.add("middle", middle)

        await outer.get("middle.inner.foo")        # "inner value"
        await outer.add("middle.inner.foo", "new")
        await inner.get("foo")                     # "new"

    Non-string keys are passed to the wrapped store untouched.
    """

    def __init__(self, store: Store, delimiter: str):
        super().__init__(store)

        if not isinstance(delimiter, str) or delimiter == "":
            raise ConfigurationError("Key delimiter must be a non-empty string")

        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    async def add(self, key: str, value: Any) -> Store:
        """Add value under the last segment of key in the nested store.

        Raises:
            NotFoundError: If an intermediate segment is unknown
            ContractViolationError: If an intermediate segment is not a Store
        """
        if not isinstance(key, str):
            return await super().add(key, value)

        *path, last = key.split(self._delimiter)
        if not path:
            return await super().add(key, value)

        store = await self._resolve(path)
        await store.add(last, value)
        return self

    async def get(self, key: str) -> Any:
        """Retrieve the item at the end of the delimited key path.

        Raises:
            NotFoundError: If any segment is unknown
            ContractViolationError: If an intermediate segment is not a Store
        """
        if not isinstance(key, str):
            return await super().get(key)

        *path, last = key.split(self._delimiter)
        if not path:
            return await super().get(key)

        store = await self._resolve(path)
        return await store.get(last)

    async def _resolve(self, path: List[str]) -> Store:
        """Walk `path` through nested stores, starting at the wrapped store."""
        store = self._store
        for part in path:
            store = await store.get(part)
            if not isinstance(store, Store):
                raise ContractViolationError(f"Key '{part}' does not hold a Store")
        return store
