"""URL-based construction of terminal stores."""

from typing import Callable, Dict
from urllib.parse import urlparse

from .backends.base import Store
from .backends.diff import DiffStore
from .backends.memory import MemoryStore

SCHEMES: Dict[str, Callable[[], Store]] = {
    "memory": MemoryStore,
    "diff": DiffStore,
}


def connect(url: str) -> Store:
    """Create a terminal store from a URL.

    Supported URL schemes:
        - memory://  In-memory key/value store
        - diff://    Store that diffs staged values against committed ones

    Args:
        url: Store URL

    Returns:
        New, empty Store instance

    Example:
        cache = connect("memory://").use(MissLookup, load)
        classes = connect("diff://")
    """
    scheme = urlparse(url).scheme

    try:
        factory = SCHEMES[scheme]
    except KeyError:
        raise ValueError(f"Unknown store scheme: {scheme}") from None

    return factory()
