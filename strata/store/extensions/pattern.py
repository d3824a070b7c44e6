"""Proxy to sub-stores based on key patterns."""

import asyncio
import logging
import re
from typing import Any, List, NamedTuple, Sequence, Tuple, Union

from ..backends.base import Store
from ..exceptions import ConfigurationError, PatternMismatchError
from .base import StoreDecorator

logger = logging.getLogger(__name__)

PatternMap = Sequence[Tuple[Union[str, re.Pattern], Store]]


class PatternMatch(NamedTuple):
    """Target of a routed key."""

    store: Store
    key: str


class PatternProxy(StoreDecorator):
    """Route keys to sub-stores by regular expression.

    Patterns are tried in order and the first that matches wins. If the
    pattern has a capture group, group 1 becomes the key in the target
    store; otherwise the key is passed through unchanged.

    Example:
        classes = DiffStore()
        bucket = MemoryStore()

        proxy = MemoryStore().use(PatternProxy, [
            (r"^c:(.*)$", classes),
            (r".", bucket),
        ])

        await proxy.add("c:foo", True)   # classes.add("foo", True)
        await proxy.add("bar", "baz")    # bucket.add("bar", "baz")

    Matching is a linear search, so put the most frequently used
    patterns first. To provide a default, end with a pattern that
    matches anything (e.g. r"."); otherwise unmatched keys raise
    PatternMismatchError.

    `reduce` is not routed; it folds over the wrapped store.
    """

    def __init__(self, store: Store, patterns: PatternMap):
        super().__init__(store)
        self._patterns = self._validate_pattern_map(patterns)

    @staticmethod
    def _validate_pattern_map(patterns: PatternMap) -> Tuple[Tuple[re.Pattern, Store], ...]:
        """Compile and check a pattern map.

        Raises:
            ConfigurationError: On any malformed entry
        """
        if isinstance(patterns, (str, bytes)) or not isinstance(patterns, Sequence):
            raise ConfigurationError("Pattern map must be a sequence of (pattern, store) pairs")

        validated: List[Tuple[re.Pattern, Store]] = []
        for i, entry in enumerate(patterns):
            try:
                pattern, store = entry
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"Pattern map entry must be a (pattern, store) pair at index {i}"
                ) from None

            if isinstance(pattern, str):
                try:
                    pattern = re.compile(pattern)
                except re.error as e:
                    raise ConfigurationError(f"Invalid pattern at index {i}: {e}") from e
            elif not isinstance(pattern, re.Pattern):
                raise ConfigurationError(f"Pattern must be a regular expression at index {i}")

            if not isinstance(store, Store):
                raise ConfigurationError(f"Pattern must map to Store at index {i}")

            validated.append((pattern, store))

        return tuple(validated)

    @property
    def patterns(self) -> Tuple[Tuple[re.Pattern, Store], ...]:
        return self._patterns

    def match_key_to_store(self, key: str) -> PatternMatch:
        """Map key to a target store and the key to use there.

        Raises:
            PatternMismatchError: If no pattern matches key
        """
        if isinstance(key, str):
            for pattern, store in self._patterns:
                match = pattern.search(key)
                if match is None:
                    continue

                store_key = key
                if pattern.groups and match.group(1) is not None:
                    store_key = match.group(1)
                return PatternMatch(store, store_key)

        logger.debug("Key %r does not match any of %d pattern(s)", key, len(self._patterns))
        raise PatternMismatchError(key)

    async def add(self, key: str, value: Any) -> Store:
        """Add value to the store matching key.

        The key stored may differ from `key` if the pattern has a
        capture group.
        """
        target = self.match_key_to_store(key)
        await target.store.add(target.key, value)
        return self

    async def get(self, key: str) -> Any:
        """Retrieve value from the store matching key."""
        target = self.match_key_to_store(key)
        return await target.store.get(target.key)

    async def clear(self) -> "PatternProxy":
        """Clear every store referenced by the pattern map.

        A store mapped by several patterns is cleared once per pattern.
        """
        await asyncio.gather(*(store.clear() for _, store in self._patterns))
        return self
