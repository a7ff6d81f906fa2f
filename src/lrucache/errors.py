"""lrucache exception hierarchy.

Keep this module small and dependency-free: it is imported by every other
module in the package and by tests.
"""

from __future__ import annotations


class LRUCacheError(Exception):
    """Base exception for all lrucache errors."""


class CacheKeyNotFoundError(LRUCacheError, KeyError):
    """Raised when a key is not present in the cache.

    Subclasses ``KeyError`` so plain mapping-style ``except KeyError`` still
    works for callers that do not import this package's errors.
    """

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would render repr(key) only.
        return f"Key not found in cache: {self.key!r}"


class InvalidCapacityError(LRUCacheError, ValueError):
    """Raised when a cache is constructed with a capacity that is not an int >= 1."""

    def __init__(self, capacity: object) -> None:
        super().__init__(f"Cache capacity must be an integer >= 1 (got {capacity!r}).")
        self.capacity = capacity
