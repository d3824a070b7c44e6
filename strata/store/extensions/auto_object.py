"""Convert mapping values to sub-stores upon retrieval."""

import asyncio
import logging
from typing import Any, Callable, Dict

from ..backends.base import Store
from ..exceptions import ConfigurationError
from ..values import is_plain_mapping
from .base import StoreDecorator

logger = logging.getLogger(__name__)


class AutoObjectStore(StoreDecorator):
    """Convert plain dict values into sub-stores holding their items.

    When a retrieved value is a plain dict, a new store is created with
    the given factory and populated with the dict's items. Anything
    else (lists, scalars, dict subclasses, other objects) is returned
    untouched. A factory that itself produces AutoObjectStores converts
    nested dicts recursively.

    Sub-stores are cached until the key is written again, after which
    the next `get` creates a _new_ store; the previous store is not
    updated to reflect the new value.

    Example:
        store = MemoryStore().use(AutoObjectStore, MemoryStore)
        await store.add("foo", {"bar": "baz"})

        await store.get("foo")      # new store (1)
        await store.get("foo")      # same store (1)
        await store.add("foo", {})
        await store.get("foo")      # new store (2)
        await store.add("foo", "bar")
        await store.get("foo")      # "bar"
    """

    def __init__(self, store: Store, factory: Callable[[], Store]):
        super().__init__(store)

        if not callable(factory):
            raise ConfigurationError("Sub-store factory must be callable")

        self._factory = factory
        self._stores: Dict[str, Store] = {}

    async def add(self, key: str, value: Any) -> Store:
        """Add value and invalidate any sub-store cached for key."""
        result = await super().add(key, value)
        self._stores.pop(key, None)
        return result

    async def get(self, key: str) -> Any:
        """Retrieve value, converting plain dicts into sub-stores."""
        if key in self._stores:
            return self._stores[key]

        value = await super().get(key)

        # another request may have materialized the store meanwhile
        if key in self._stores:
            return self._stores[key]

        if not is_plain_mapping(value):
            return value

        # cache _before_ populating so that concurrent requests share the
        # store rather than creating another
        substore = self._factory()
        self._stores[key] = substore
        logger.debug("Materializing %d item(s) under %r", len(value), key)

        await asyncio.gather(*substore.populate(value))
        return substore
