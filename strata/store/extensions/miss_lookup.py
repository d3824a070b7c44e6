"""Automatically look up values on store miss."""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Union

from ..backends.base import Store
from ..exceptions import ConfigurationError, NotFoundError
from .base import StoreDecorator

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Union[Awaitable[Any], Any]]


class MissLookup(StoreDecorator):
    """Look up missing values and hold requests until they are available.

    A common use for key/value stores is caching: on a miss, the caller
    computes the item and adds it to the cache. This does that
    automatically by calling `lookup` on a miss, adding its result, and
    then reading the key again from the wrapped store (letting it do its
    own thing).

    To guard against stampeding, every request for a key shares the
    same pending operation until it settles.
    That includes the lookup itself: a request arriving while the lookup,
    the add or the re-read is still in flight waits for the same result
    instead of starting another lookup.

    Example:
        async def load(key):
            return key + " foobar"

        store = MemoryStore().use(MissLookup, load)
        await store.get("unknown")  # "unknown foobar"

    A lookup that returns None found nothing: nothing is added, the
    request fails with NotFoundError and the next request calls the
    lookup again. There is no negative caching, so an expensive lookup
    should account for that itself.

    This can also be used purely to prevent stampeding by providing a
    lookup that is effectively a noop.
    """

    def __init__(self, store: Store, lookup: Lookup):
        super().__init__(store)

        if not callable(lookup):
            raise ConfigurationError("Lookup function must be callable")

        self._lookup = lookup
        self._misses: Dict[str, "asyncio.Future"] = {}

    async def get(self, key: str) -> Any:
        """Retrieve value, looking it up on a miss.

        Raises:
            NotFoundError: If the lookup found nothing
        """
        # must be registered before the first await so that concurrent
        # requests see it
        pending = self._misses.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._get_or_lookup(key))
            self._misses[key] = pending

        return await asyncio.shield(pending)

    async def _get_or_lookup(self, key: str) -> Any:
        try:
            try:
                return await self._store.get(key)
            except NotFoundError:
                pass

            logger.debug("Store miss on %r; looking up", key)
            value = self._lookup(key)
            if inspect.isawaitable(value):
                value = await value

            if value is None:
                raise NotFoundError(key)

            await self._store.add(key, value)
            return await self._store.get(key)
        finally:
            del self._misses[key]
