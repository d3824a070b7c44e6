"""Load configuration files into stores."""

import asyncio
import json
import logging
from typing import Any, Callable

from .backends.base import Store
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfLoader:
    """Produce populated stores from configuration files.

    The store factory decides how the configuration is exposed: with an
    AutoObjectStore factory and DelimitedKey, nested sections can be
    read by path.

    Example:
        def conf_store():
            return MemoryStore().use(AutoObjectStore, conf_store)

        loader = ConfLoader(lambda: conf_store().use(DelimitedKey, "."))
        conf = await loader.from_file("conf.json")
        await conf.get("server.port")
    """

    def __init__(self, store_factory: Callable[[], Store]):
        """Initialize with the constructor used for new stores.

        Args:
            store_factory: Returns a new, empty Store
        """
        if not callable(store_factory):
            raise ConfigurationError("Store factory must be callable")

        self._store_factory = store_factory

    async def from_file(self, filename: str) -> Store:
        """Produce a store populated from a configuration file.

        Args:
            filename: Path to configuration JSON

        Returns:
            Store holding each top-level entry of the file

        Raises:
            OSError: If the file cannot be read
            ConfigurationError: If the file cannot be parsed
        """
        data = await asyncio.to_thread(_read_file, filename)

        parsed = self.parse_conf_data(data)
        if not isinstance(parsed, dict):
            raise ConfigurationError(
                f"Configuration in {filename} must be an object, "
                f"got {type(parsed).__name__}"
            )

        store = self._store_factory()
        await asyncio.gather(*store.populate(parsed))

        logger.debug("Loaded %d configuration key(s) from %s", len(parsed), filename)
        return store

    def parse_conf_data(self, data: str) -> Any:
        """Parse raw configuration string as JSON.

        Override to support other formats.
        """
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration data: {e}") from e


def _read_file(filename: str) -> str:
    with open(filename, encoding="utf-8") as f:
        return f.read()
