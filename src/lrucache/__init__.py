from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from lrucache.cache import LRUCache
from lrucache.errors import (
    CacheKeyNotFoundError,
    InvalidCapacityError,
    LRUCacheError,
)
from lrucache.memoize import memoize


def _package_version() -> str:
    try:
        return version("lrucache")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "CacheKeyNotFoundError",
    "InvalidCapacityError",
    "LRUCache",
    "LRUCacheError",
    "__version__",
    "memoize",
]
