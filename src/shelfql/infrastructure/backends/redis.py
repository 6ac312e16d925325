"""Redis cache backend implementation."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from shelfql.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class RedisCacheBackend:
    """Redis cache backend for distributed deployments.

    Values are stored as strings under ``<key_prefix>:<key>``; expiry is
    delegated to Redis. Transport failures surface as
    ``StoreUnavailableError`` so callers can fall back to uncached
    operation.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "shelfql",
        default_ttl: Optional[int] = None,
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Prefix for all cache keys.
            default_ttl: Default TTL in seconds, None for no expiry.
            client: Pre-built client, used instead of ``redis_url``.
        """
        self._redis: redis.Redis = client or redis.from_url(
            redis_url, decode_responses=True
        )
        self._redis_url = redis_url
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    @contextmanager
    def _transport_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.debug("Redis %s failed: %s", operation, e)
            raise StoreUnavailableError(
                f"Redis unavailable during {operation}: {e}", backend="redis"
            ) from e

    async def get(self, key: str) -> Optional[str]:
        """Retrieve cached value by key.

        Returns:
            The cached value, or None if not found or expired.

        Raises:
            StoreUnavailableError: If Redis cannot be reached.
        """
        with self._transport_errors("get"):
            value = await self._redis.get(self._prefixed_key(key))
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(
        self,
        key: str,
        value: str,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, uses default.

        Raises:
            StoreUnavailableError: If Redis cannot be reached.
        """
        prefixed_key = self._prefixed_key(key)

        if ttl is not None:
            milliseconds = int(ttl.total_seconds() * 1000)
        elif self._default_ttl is not None:
            milliseconds = self._default_ttl * 1000
        else:
            milliseconds = None

        with self._transport_errors("set"):
            if milliseconds is None:
                await self._redis.set(prefixed_key, value)
            elif milliseconds <= 0:
                await self._redis.delete(prefixed_key)
            else:
                await self._redis.set(prefixed_key, value, px=milliseconds)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Returns:
            True if the key existed and was deleted, False otherwise.

        Raises:
            StoreUnavailableError: If Redis cannot be reached.
        """
        with self._transport_errors("delete"):
            result = await self._redis.delete(self._prefixed_key(key))
        return result > 0

    async def clear(self) -> None:
        """Clear all cached values with our prefix.

        Note: This only clears keys with our prefix, not the entire Redis DB.
        """
        with self._transport_errors("clear"):
            await self._delete_by_pattern(f"{self._key_prefix}:*")

    async def ping(self) -> bool:
        with self._transport_errors("ping"):
            return bool(await self._redis.ping())

    async def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS so large databases are not blocked.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = await self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                count += await self._redis.delete(*keys)

            if cursor == 0:
                break

        return count

    def _prefixed_key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        await self.close()
