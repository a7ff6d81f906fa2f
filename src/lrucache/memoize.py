"""Decorator that fronts a function with an `LRUCache`."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Hashable
from typing import Any, TypeVar, cast

from lrucache.cache import LRUCache
from lrucache.errors import CacheKeyNotFoundError

logger = logging.getLogger("lrucache.memoize")

DEFAULT_CAPACITY = 128

F = TypeVar("F", bound=Callable[..., object])

# Separates positional from keyword arguments so f(1, x=2) and f(1, "x", 2)
# never share a key.
_KWARGS_MARK = object()


def _make_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:
    if not kwargs:
        return args
    return (*args, _KWARGS_MARK, *sorted(kwargs.items()))


def memoize(*, capacity: int = DEFAULT_CAPACITY) -> Callable[[F], F]:
    """Decorator factory caching results of the decorated function.

    The cache is keyed on the call arguments, which must be hashable. The
    wrapper exposes the backing cache as ``.cache`` and a ``.cache_clear()``
    helper.
    """

    # Build a throwaway cache up front so a bad capacity fails at decoration.
    LRUCache(capacity)

    def _decorate(fn: F) -> F:
        cache: LRUCache[Hashable, object] = LRUCache(capacity)

        @functools.wraps(fn)
        def _wrapper(*args: Any, **kwargs: Any) -> object:
            key = _make_key(args, kwargs)
            try:
                return cache.get(key)
            except CacheKeyNotFoundError:
                pass
            logger.debug("Cache miss for %s%r", fn.__qualname__, key)
            result = fn(*args, **kwargs)
            cache.set(key, result)
            return result

        w = cast(Any, _wrapper)
        w.cache = cache
        w.cache_clear = cache.clear
        return cast(F, _wrapper)

    return _decorate
