"""Last-good category cache.

The pipeline itself is cache-free. Callers that want to show the most recent good result while
a new query is in flight (or after it failed) inject one of these explicitly.
"""

from __future__ import annotations

import re
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Sequence
from typing import Protocol

from searchlens.models.category import Category

_WS_RE = re.compile(r"\s+")


class CategoryCache(Protocol):
    """Minimal get/set interface used by :class:`~searchlens.pipeline.CategorizationService`."""

    def get(self, key: str) -> list[Category] | None:
        """Return the cached list or None."""

    def set(self, key: str, categories: Sequence[Category]) -> None:  # noqa: A003
        """Store a category list."""


def cache_key(query: str) -> str:
    """Normalize a query into a cache key (case and whitespace insensitive)."""

    return _WS_RE.sub(" ", (query or "").strip().lower())


class InMemoryCategoryCache:
    """LRU cache with per-entry TTL.

    Entries are deep-copied on the way in and out so callers can never mutate what is stored.
    Thread-safe; the API server calls it from worker threads.
    """

    def __init__(
        self,
        max_size: int = 128,
        ttl_seconds: float = 3600.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_size: Maximum number of queries kept.
            ttl_seconds: Time to live per entry.
            clock: Time source, injectable for tests.
        """

        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, tuple[list[Category], float]] = OrderedDict()

    def get(self, key: str) -> list[Category] | None:
        """Get a cached list if present and not expired."""

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            categories, expire_at = entry
            if self._clock() > expire_at:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return [c.model_copy(deep=True) for c in categories]

    def set(self, key: str, categories: Sequence[Category]) -> None:  # noqa: A003
        """Store a list, evicting the least recently used entry when full."""

        stored = [c.model_copy(deep=True) for c in categories]
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
            self._entries[key] = (stored, self._clock() + self.ttl_seconds)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def cleanup_expired(self) -> int:
        """Remove expired entries and return how many were dropped."""

        with self._lock:
            now = self._clock()
            expired = [k for k, (_, expire_at) in self._entries.items() if now > expire_at]
            for key in expired:
                del self._entries[key]
            return len(expired)
