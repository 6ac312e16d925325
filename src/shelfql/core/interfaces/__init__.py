"""Core interfaces (Protocol classes) for shelfql."""

from shelfql.core.interfaces.book_source import IBookSource
from shelfql.core.interfaces.cache_backend import ICacheBackend
from shelfql.core.interfaces.key_builder import IKeyBuilder
from shelfql.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "IBookSource",
]
