"""Tests for the last-good category cache."""

from __future__ import annotations

import pytest

from searchlens.cache import InMemoryCategoryCache, cache_key
from searchlens.models.category import Category


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_cache_key_normalizes_case_and_whitespace() -> None:
    """It should treat queries differing in case or spacing as one key."""

    assert cache_key("  AI   Market ") == cache_key("ai market") == "ai market"


def test_cache_returns_copies() -> None:
    """It should store and return copies so callers cannot mutate the stored list."""

    cache = InMemoryCategoryCache()
    stored = [Category(name="Business")]
    cache.set("q", stored)
    stored.append(Category(name="Other"))

    got = cache.get("q")
    assert got is not None
    assert [c.name for c in got] == ["Business"]
    got.clear()
    assert cache.get("q") is not None


def test_cache_expires_entries() -> None:
    """It should drop entries older than the TTL."""

    clock = FakeClock()
    cache = InMemoryCategoryCache(ttl_seconds=10, clock=clock)
    cache.set("a", [Category(name="A")])
    cache.set("b", [Category(name="B")])

    clock.now = 5
    assert cache.get("a") is not None

    clock.now = 11
    assert cache.cleanup_expired() == 2
    assert cache.size() == 0
    assert cache.get("a") is None


def test_cache_evicts_least_recently_used() -> None:
    """It should evict the least recently used key when full."""

    cache = InMemoryCategoryCache(max_size=2)
    cache.set("a", [Category(name="A")])
    cache.set("b", [Category(name="B")])
    cache.get("a")
    cache.set("c", [Category(name="C")])

    assert cache.get("b") is None
    assert cache.get("a") is not None
    assert cache.get("c") is not None


def test_cache_remove_and_clear() -> None:
    """It should support removing a key and clearing everything."""

    cache = InMemoryCategoryCache()
    cache.set("a", [])
    cache.set("b", [])
    cache.remove("a")
    assert cache.get("a") is None
    cache.clear()
    assert cache.size() == 0


def test_cache_rejects_zero_size() -> None:
    """It should refuse a max_size below one."""

    with pytest.raises(ValueError):
        InMemoryCategoryCache(max_size=0)
