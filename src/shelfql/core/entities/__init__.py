"""Domain entities for shelfql."""

from shelfql.core.entities.book import Book
from shelfql.core.entities.cache_config import CacheConfig, Settings
from shelfql.core.entities.cache_control import (
    CacheHint,
    CacheScope,
    FieldCacheHint,
    ResponseCachePolicy,
)
from shelfql.core.entities.cache_entry import CacheEntry

__all__ = [
    "Book",
    "CacheEntry",
    "CacheConfig",
    "Settings",
    "CacheHint",
    "CacheScope",
    "FieldCacheHint",
    "ResponseCachePolicy",
]
