"""In-memory cache backend implementation."""

import math
import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _Item(NamedTuple):
    value: str
    ttl: float | None


def _time_to_use(key: str, item: _Item, now: float) -> float:
    if item.ttl is None:
        return math.inf
    return now + item.ttl


class InMemoryCacheBackend:
    """In-memory cache backend with LRU eviction and per-entry TTL.

    Suitable for single-process deployments. Built on cachetools'
    TLRUCache: each entry carries its own expiry, and once ``maxsize``
    is reached the least recently used entry is evicted.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: Default TTL in seconds, None for no expiry.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _Item] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str) -> str | None:
        item = self._cache.get(key)
        return item.value if item is not None else None

    async def set(
        self,
        key: str,
        value: str,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value, overwriting any existing entry.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, uses the default.
        """
        seconds = ttl.total_seconds() if ttl is not None else self._default_ttl
        if seconds is not None and seconds <= 0:
            # TLRUCache silently skips already-expired items
            self._cache.pop(key, None)
            return
        self._cache[key] = _Item(value, seconds)

    async def delete(self, key: str) -> bool:
        if key not in self._cache:
            return False
        try:
            del self._cache[key]
        except KeyError:
            return False
        return True

    async def clear(self) -> None:
        self._cache.clear()

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        """Return the number of items in the cache, expired ones included."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        return self._maxsize
