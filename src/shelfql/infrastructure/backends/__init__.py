"""Cache backend implementations."""

from shelfql.infrastructure.backends.logging_backend import LoggingCacheBackend
from shelfql.infrastructure.backends.memory import InMemoryCacheBackend
from shelfql.infrastructure.backends.redis import RedisCacheBackend

__all__ = [
    "InMemoryCacheBackend",
    "LoggingCacheBackend",
    "RedisCacheBackend",
]
