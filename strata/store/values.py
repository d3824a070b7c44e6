"""Classification of stored values.

Stores hold arbitrary data, but two components care about its shape:
DiffStore recurses into containers and AutoObjectStore turns plain
mappings into sub-stores.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Shape of a stored value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """Classify a value.

    Strings and bytes are scalars even though they are iterable.
    """
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def is_plain_mapping(value: Any) -> bool:
    """Whether `value` is a vanilla dict (subclasses excluded)."""
    return type(value) is dict
