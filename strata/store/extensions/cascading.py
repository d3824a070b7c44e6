"""Store of stores with cascading clear."""

import asyncio
import logging
from typing import Any, List

from ..backends.base import Store
from ..exceptions import ContractViolationError
from .base import StoreDecorator

logger = logging.getLogger(__name__)


class Cascading(StoreDecorator):
    """Store of stores whose `clear` cascades to every held store.

    Only Store values may be added. Clearing the container clears each
    held store but keeps the stores themselves attached, so the
    container effectively namespaces a set of caches that can all be
    reloaded at once.

    Other operations do not cascade: `get` returns the held store, it
    does not query them.

    Example:
        cache = MemoryStore().use(Cascading)
        await cache.add("programs", program_cache)
        await cache.add("steps", step_cache)

        await cache.clear()  # True once both caches are cleared

        await cache.add("invalid", "value")  # raises ContractViolationError
    """

    async def add(self, key: str, value: Any) -> Store:
        """Attach a store under key.

        Raises:
            ContractViolationError: If value is not a Store
        """
        if not isinstance(value, Store):
            raise ContractViolationError(
                f"Can only add Store to Cascading stores (got {type(value).__name__})"
            )
        return await super().add(key, value)

    async def clear(self) -> bool:
        """Clear every held store.

        A held store succeeds when its clear fulfils with True or with a
        Store. A held store raising aborts the aggregate with its error;
        stores already cleared stay cleared.

        Returns:
            True if every held store cleared successfully
        """
        stores: List[Store] = await self.reduce(
            lambda accum, store, key: accum + [store], []
        )
        logger.debug("Cascading clear to %d store(s)", len(stores))

        results = await asyncio.gather(*(store.clear() for store in stores))
        return all(_cleared(result) for result in results)


def _cleared(result: Any) -> bool:
    return result is True or isinstance(result, Store)
