"""Infrastructure layer implementations for shelfql."""

from shelfql.infrastructure.backends import (
    InMemoryCacheBackend,
    LoggingCacheBackend,
    RedisCacheBackend,
)
from shelfql.infrastructure.key_builders import DefaultKeyBuilder
from shelfql.infrastructure.serializers import JsonSerializer
from shelfql.infrastructure.sources import DEFAULT_BOOKS, InMemoryBookSource

__all__ = [
    "InMemoryCacheBackend",
    "LoggingCacheBackend",
    "RedisCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "DEFAULT_BOOKS",
    "InMemoryBookSource",
]
