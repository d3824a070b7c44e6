"""Base class for store extensions."""

from typing import Any, Callable

from ..backends.base import Store, T


class StoreDecorator(Store):
    """Store that wraps another store.

    Every operation is forwarded to the wrapped store unchanged;
    subclasses override only the operations whose behavior they alter.
    Where the wrapped store fulfils with itself, `add` and `clear` fulfil
    with the wrapper instead, so chaining keeps every layer of a
    composition; any other result is passed through untouched.
    """

    def __init__(self, store: Store):
        self._store = store

    @property
    def wrapped(self) -> Store:
        """The store beneath this layer."""
        return self._store

    async def add(self, key: str, value: Any) -> Store:
        return self._own(await self._store.add(key, value))

    async def get(self, key: str) -> Any:
        return await self._store.get(key)

    async def clear(self) -> Any:
        return self._own(await self._store.clear())

    async def reduce(self, fold: Callable[[T, Any, str], T], initial: T) -> T:
        return await self._store.reduce(fold, initial)

    def _own(self, result: Any) -> Any:
        return self if result is self._store else result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"
