"""Abstract base class for stores."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, TypeVar

T = TypeVar("T")


class Store(ABC):
    """Asynchronous key/value store with bulk clear.

    Every operation is a coroutine; failures are raised when the result
    is awaited. Terminal stores (MemoryStore, DiffStore) hold the data,
    while extensions wrap another store and alter only the operations
    they care about.

    Example:
        store = MemoryStore()
        await store.add("foo", "bar")
        await store.get("foo")  # "bar"

        await asyncio.gather(*store.populate({"a": 1, "b": 2}))
        await store.reduce(lambda acc, value, key: acc + value, 0)  # 3
    """

    @abstractmethod
    async def add(self, key: str, value: Any) -> "Store":
        """Add item to store under `key` with value `value`.

        Args:
            key: Store key
            value: Value for key

        Returns:
            The store itself (for chaining)
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Any:
        """Retrieve item from store under `key`.

        Args:
            key: Store key

        Returns:
            The value for key

        Raises:
            NotFoundError: If the key is unavailable
        """
        pass

    @abstractmethod
    async def clear(self) -> Any:
        """Clear all items in store.

        Returns:
            The store itself, unless an extension redefines clearing
        """
        pass

    @abstractmethod
    async def reduce(self, fold: Callable[[T, Any, str], T], initial: T) -> T:
        """Fold (reduce) all stored values.

        The order of folding is undefined.

        Args:
            fold: Called as fold(accumulator, value, key)
            initial: Initial value for the accumulator

        Returns:
            Final accumulator value
        """
        pass

    def populate(self, mapping: Mapping[str, Any]) -> List["asyncio.Task"]:
        """Schedule an add for each entry in `mapping`.

        This goes through `add`, so anything that overrides `add` also
        affects population. The tasks are returned uncombined; use
        asyncio.gather() to wait for all of them.

        Args:
            mapping: Key/value pairs to add

        Returns:
            One task per add, in no particular order of completion
        """
        return [
            asyncio.ensure_future(self.add(key, value))
            for key, value in mapping.items()
        ]

    def use(self, extension: Callable[..., "Store"], *args, **kwargs) -> "Store":
        """Wrap this store in an extension.

        Example:
            cache = MemoryStore().use(MissLookup, load).use(Cascading)

        Args:
            extension: Extension class (or factory) taking the wrapped
                store as its first argument
            *args, **kwargs: Extension configuration

        Returns:
            The wrapping store
        """
        return extension(self, *args, **kwargs)
