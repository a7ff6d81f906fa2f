import pytest

from lrucache.errors import (
    CacheKeyNotFoundError,
    InvalidCapacityError,
    LRUCacheError,
)


def test_all_errors_are_subclasses_of_lrucache_error() -> None:
    assert issubclass(CacheKeyNotFoundError, LRUCacheError)
    assert issubclass(InvalidCapacityError, LRUCacheError)


def test_builtin_bases_are_kept_for_mapping_idioms() -> None:
    assert issubclass(CacheKeyNotFoundError, KeyError)
    assert issubclass(InvalidCapacityError, ValueError)


def test_error_message_is_preserved() -> None:
    msg = "boom"
    err = LRUCacheError(msg)
    assert str(err) == msg


def test_key_not_found_carries_key_and_readable_message() -> None:
    err = CacheKeyNotFoundError(("a", 1))
    assert err.key == ("a", 1)
    assert str(err) == "Key not found in cache: ('a', 1)"


def test_invalid_capacity_carries_capacity() -> None:
    err = InvalidCapacityError(0)
    assert err.capacity == 0
    assert "0" in str(err)


def test_can_catch_any_lrucache_error() -> None:
    def raise_one() -> None:
        raise CacheKeyNotFoundError("nope")

    with pytest.raises(LRUCacheError):
        raise_one()

    with pytest.raises(KeyError):
        raise_one()
