"""Core domain layer for shelfql."""

from shelfql.core.entities import Book, CacheConfig, CacheEntry, Settings
from shelfql.core.exceptions import (
    CacheError,
    SerializationError,
    StoreUnavailableError,
)
from shelfql.core.interfaces import (
    IBookSource,
    ICacheBackend,
    IKeyBuilder,
    ISerializer,
)
from shelfql.core.services import CacheService

__all__ = [
    # Entities
    "Book",
    "CacheConfig",
    "CacheEntry",
    "Settings",
    # Errors
    "CacheError",
    "SerializationError",
    "StoreUnavailableError",
    # Interfaces
    "IBookSource",
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    # Services
    "CacheService",
]
