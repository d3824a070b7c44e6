"""Store that lazily computes diffs since the last commit."""

import logging
from typing import Any, Callable, Dict, Iterable

from ..exceptions import NotFoundError
from ..values import ValueKind, kind_of
from .base import Store, T

logger = logging.getLogger(__name__)


class DiffStore(Store):
    """Lazily compute diffs of values since the last commit.

    Unlike other stores, you don't always get out what you put in:
        - `add` stages a change to a key;
        - `get` calculates the diff of a key against its committed value;
        - `clear` commits staged values, clearing all diffs.

    Values are compared recursively until a scalar is found. A scalar
    equal to its committed counterpart is unchanged and represented as
    None, as long as both have the same type (0 and False differ);
    otherwise the staged value takes its place. The union of the keys of
    both sides is included in the diff.

    Example:
        store = DiffStore()
        await store.add("foo", ["bar", "baz"])
        await store.clear()
        await store.add("foo", ["bar", "quux"])
        await store.get("foo")  # [None, "quux"]

        store = DiffStore()
        await store.add("foo", {"foo": "bar"})
        await store.clear()
        await store.add("foo", {"baz": "quux"})
        await store.get("foo")  # {"baz": "quux", "foo": None}

    Since no change is represented as None, a staged None cannot be told
    apart from an unchanged value; override `diff` if that matters.
    """

    def __init__(self):
        self._staged: Dict[str, Any] = {}
        self._committed: Dict[str, Any] = {}

    async def add(self, key: str, value: Any) -> "DiffStore":
        """Stage a change to key."""
        self._staged[key] = value
        return self

    async def get(self, key: str) -> Any:
        """Retrieve the diff of key against its committed value.

        Raises:
            NotFoundError: If key was never added
        """
        try:
            known = key in self._staged or key in self._committed
        except TypeError:
            # unhashable keys can't be present either
            known = False
        if not known:
            raise NotFoundError(key)

        return self.diff(self._staged.get(key), self._committed.get(key))

    async def clear(self) -> "DiffStore":
        """Commit staged data and clear diffs.

        Committed data is not removed; a committed key is considered
        unchanged until it is staged again.
        """
        logger.debug("Committing %d staged key(s)", len(self._staged))
        self._committed.update(self._staged)
        self._staged = {}
        return self

    async def reduce(self, fold: Callable[[T, Any, str], T], initial: T) -> T:
        """Fold over the diffs of all staged values.

        Only staged keys might differ from their committed values, so
        committed-only keys are never visited.
        """
        accum = initial
        for key, value in list(self._staged.items()):
            accum = fold(accum, self.diff(value, self._committed.get(key)), key)
        return accum

    def diff(self, data: Any, orig: Any) -> Any:
        """Recursively diff `data` against `orig`.

        Args:
            data: New data
            orig: Original data to diff against

        Returns:
            `data` if there is no original; None for an unchanged
            scalar; otherwise a container shaped like `data`
        """
        if orig is None:
            # no previous value, so data is new and _is_ the diff
            return data

        kind = kind_of(data)

        if kind is ValueKind.SCALAR:
            return None if _same_scalar(data, orig) else data

        if kind is ValueKind.SEQUENCE:
            size = len(data)
            if kind_of(orig) is ValueKind.SEQUENCE:
                size = max(size, len(orig))
            return [
                self.diff(_item(data, i), _item(orig, i)) for i in range(size)
            ]

        return {
            key: self.diff(_item(data, key), _item(orig, key))
            for key in _key_union(data, orig)
        }


def _same_scalar(data: Any, orig: Any) -> bool:
    """Strict equality: 0, False and 0.0 are different values."""
    return type(data) is type(orig) and data == orig


def _item(container: Any, key: Any) -> Any:
    """Look up key in a sequence or mapping, None when absent."""
    kind = kind_of(container)

    if kind is ValueKind.MAPPING:
        return container.get(key)
    if kind is ValueKind.SEQUENCE and isinstance(key, int) and key < len(container):
        return container[key]
    return None


def _key_union(first: Any, second: Any) -> Iterable[Any]:
    """Keys of `first` followed by the keys only `second` has."""
    keys = dict.fromkeys(first)
    if kind_of(second) is ValueKind.MAPPING:
        keys.update(dict.fromkeys(second))
    return keys
