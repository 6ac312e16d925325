"""Cache service - stores and looks up whole GraphQL responses."""

import logging
from datetime import timedelta
from typing import Any

from shelfql.core.entities.cache_config import CacheConfig
from shelfql.core.entities.cache_entry import CacheEntry
from shelfql.core.exceptions import SerializationError, StoreUnavailableError
from shelfql.core.interfaces.cache_backend import ICacheBackend
from shelfql.core.interfaces.key_builder import IKeyBuilder
from shelfql.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)


class CacheService:
    """Domain service that orchestrates response caching.

    Composes a backend, a key builder and a serializer. When the backend
    reports ``StoreUnavailableError`` the service degrades to uncached
    operation: lookups count as misses and writes are skipped, so a
    cache outage never fails the request.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            backend: The cache backend to use for storage.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding values.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self._config = config or CacheConfig()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._errors = 0

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def backend(self) -> ICacheBackend:
        return self._backend

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, store errors and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "errors": self._errors,
            "total": self._hits + self._misses,
        }

    async def get_cached_response(
        self,
        operation_name: str | None,
        query: str,
        variables: dict[str, Any] | None,
        context: dict[str, Any] | None = None,
    ) -> Any | None:
        """Try to get cached response for GraphQL operation.

        Args:
            operation_name: The GraphQL operation name.
            query: The GraphQL query string.
            variables: Variables passed to the operation.
            context: Optional additional context for key generation.

        Returns:
            The cached response value, or None on a miss or when the
            store is unavailable.
        """
        if not self._config.enabled:
            return None

        key = self._key_builder.build(
            operation_name=operation_name,
            query=query,
            variables=variables,
            context=context,
        )

        try:
            cached_data = await self._backend.get(key)
        except StoreUnavailableError as e:
            self._errors += 1
            self._misses += 1
            logger.warning("Cache lookup skipped, store unavailable: %s", e)
            return None

        if cached_data is None:
            self._misses += 1
            return None

        try:
            value = self._serializer.deserialize(cached_data)
        except SerializationError as e:
            self._misses += 1
            logger.warning("Discarding unreadable cache entry %s: %s", key, e)
            await self._discard(key)
            return None

        self._hits += 1
        return value

    async def cache_response(
        self,
        operation_name: str | None,
        query: str,
        variables: dict[str, Any] | None,
        response: Any,
        ttl: timedelta | None = None,
        context: dict[str, Any] | None = None,
    ) -> CacheEntry | None:
        """Cache GraphQL response.

        Args:
            operation_name: The GraphQL operation name.
            query: The GraphQL query string.
            variables: Variables passed to the operation.
            response: The response to cache.
            ttl: Optional TTL. Uses config default if not provided.
            context: Optional additional context for key generation.

        Returns:
            The written CacheEntry, or None if nothing was stored.

        Raises:
            SerializationError: If the response cannot be serialized.
        """
        if not self._config.enabled:
            return None

        key = self._key_builder.build(
            operation_name=operation_name,
            query=query,
            variables=variables,
            context=context,
        )
        effective_ttl = ttl or self._config.default_ttl
        serialized = self._serializer.serialize(response)

        try:
            await self._backend.set(key, serialized, effective_ttl)
        except StoreUnavailableError as e:
            self._errors += 1
            logger.warning("Response not cached, store unavailable: %s", e)
            return None

        return CacheEntry.create(key=key, value=serialized, ttl=effective_ttl)

    async def clear(self) -> None:
        """Clear all cached entries and reset statistics."""
        await self._backend.clear()
        self._hits = 0
        self._misses = 0
        self._errors = 0

    async def _discard(self, key: str) -> None:
        try:
            await self._backend.delete(key)
        except StoreUnavailableError as e:
            self._errors += 1
            logger.warning("Could not discard cache entry %s: %s", key, e)
