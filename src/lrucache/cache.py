"""Fixed-capacity least-recently-used cache.

The cache keeps two structures in lockstep:

* an index, ``dict[key, _Entry]``, where each entry holds the value and the
  arena slot of the key's node in the recency list;
* the recency list itself, a doubly-linked list stored in an arena of
  parallel ``prev`` / ``next`` / ``keys`` lists addressed by integer slots.
  Head is most recently used, tail is least recently used.

Index entries refer to their node by slot number only, so splicing a node in
or out is a handful of list assignments and every operation is O(1).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lrucache.errors import CacheKeyNotFoundError, InvalidCapacityError

logger = logging.getLogger("lrucache.cache")

K = TypeVar("K")
V = TypeVar("V")

_NIL = -1


@dataclass(slots=True)
class _Entry(Generic[V]):
    value: V
    slot: int


class LRUCache(Generic[K, V]):
    """A bounded key/value cache that evicts the least recently used key.

    ``set`` and a successful ``get`` both move the key to the most-recently-used
    position. Inserting a new key into a full cache evicts the key at the tail.

    Not thread-safe. Concurrent callers must hold one lock around every public
    method, ``get`` included, since lookups reorder the recency list.
    """

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise InvalidCapacityError(capacity)
        self._capacity = capacity
        self._index: dict[K, _Entry[V]] = {}
        self._reset_arena()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._index)})"

    # Arena bookkeeping

    def _reset_arena(self) -> None:
        # Grown lazily up to `capacity` slots; freed slots are recycled.
        self._keys: list[Any] = []
        self._prev: list[int] = []
        self._next: list[int] = []
        self._free: list[int] = []
        self._head = _NIL
        self._tail = _NIL

    def _alloc(self, key: K) -> int:
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            return slot
        self._keys.append(key)
        self._prev.append(_NIL)
        self._next.append(_NIL)
        return len(self._keys) - 1

    def _release(self, slot: int) -> None:
        self._keys[slot] = None
        self._free.append(slot)

    def _link_front(self, slot: int) -> None:
        self._prev[slot] = _NIL
        self._next[slot] = self._head
        if self._head == _NIL:
            self._tail = slot
        else:
            self._prev[self._head] = slot
        self._head = slot

    def _unlink(self, slot: int) -> None:
        prev, nxt = self._prev[slot], self._next[slot]
        if prev == _NIL:
            self._head = nxt
        else:
            self._next[prev] = nxt
        if nxt == _NIL:
            self._tail = prev
        else:
            self._prev[nxt] = prev
        self._prev[slot] = _NIL
        self._next[slot] = _NIL

    def _promote(self, slot: int) -> None:
        if slot == self._head:
            return
        self._unlink(slot)
        self._link_front(slot)

    def _evict(self) -> None:
        slot = self._tail
        key = self._keys[slot]
        self._unlink(slot)
        del self._index[key]
        self._release(slot)
        logger.debug("Evicted %r (capacity=%d)", key, self._capacity)

    # Public operations

    def set(self, key: K, value: V) -> None:
        """Insert or update `key`, making it the most recently used.

        Updating an existing key never evicts. Inserting a new key into a full
        cache evicts the least recently used key first.
        """

        # Hash the key before touching anything so an unhashable key leaves
        # the cache as it was.
        entry = self._index.get(key)
        if entry is not None:
            entry.value = value
            self._promote(entry.slot)
            return

        if len(self._index) >= self._capacity:
            self._evict()

        slot = self._alloc(key)
        self._link_front(slot)
        self._index[key] = _Entry(value, slot)

    def get(self, key: K) -> V:
        """Return the value for `key` and mark it most recently used.

        Raises `CacheKeyNotFoundError` when the key is absent.
        """

        try:
            entry = self._index[key]
        except KeyError:
            raise CacheKeyNotFoundError(key) from None
        self._promote(entry.slot)
        return entry.value

    def remove(self, key: K) -> None:
        """Remove `key`. Raises `CacheKeyNotFoundError` when the key is absent."""

        try:
            entry = self._index.pop(key)
        except KeyError:
            raise CacheKeyNotFoundError(key) from None
        self._unlink(entry.slot)
        self._release(entry.slot)

    def discard(self, key: K) -> None:
        """Remove `key` if present; do nothing otherwise."""

        if key in self._index:
            self.remove(key)

    def clear(self) -> None:
        self._index.clear()
        self._reset_arena()

    # Introspection (does not affect recency)

    def keys_in_order(self) -> list[K]:
        """Return keys from most recently used to least recently used."""

        out: list[K] = []
        slot = self._head
        while slot != _NIL:
            out.append(self._keys[slot])
            slot = self._next[slot]
        return out

    def items(self) -> list[tuple[K, V]]:
        """Return ``(key, value)`` pairs, most recently used first."""

        return [(key, self._index[key].value) for key in self.keys_in_order()]
