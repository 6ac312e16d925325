"""shelfql - a book GraphQL server with response caching.

Responses are cached whole in a key-value store. Stores are
interchangeable: an in-memory LRU store, a Redis store, and a logging
decorator that wraps either of them.

Example:
    from shelfql import Settings, create_app

    settings = Settings(backend="redis", redis_url="redis://localhost:6379")
    app = create_app(settings)

Dynamic cache hints in resolvers:
    from shelfql.hints import private_cache

    @query.field("books")
    def resolve_books(_, info):
        private_cache(info, max_age=60)
        return books
"""

from shelfql.core.entities import (
    Book,
    CacheConfig,
    CacheEntry,
    CacheHint,
    CacheScope,
    FieldCacheHint,
    ResponseCachePolicy,
    Settings,
)
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
from shelfql.core.services import (
    CACHE_CONTROL_DIRECTIVE,
    CacheControlCalculator,
    CacheControlContext,
    CacheService,
    DirectiveParser,
    SchemaDirectives,
    create_cache_control_context,
    get_cache_control_directive_sdl,
)
from shelfql.infrastructure import (
    DEFAULT_BOOKS,
    DefaultKeyBuilder,
    InMemoryBookSource,
    InMemoryCacheBackend,
    JsonSerializer,
    LoggingCacheBackend,
    RedisCacheBackend,
)
from shelfql.server import create_app

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entities
    "Book",
    "CacheConfig",
    "CacheEntry",
    "Settings",
    # Cache control
    "CacheHint",
    "CacheScope",
    "FieldCacheHint",
    "ResponseCachePolicy",
    "CacheControlCalculator",
    "CacheControlContext",
    "create_cache_control_context",
    "DirectiveParser",
    "SchemaDirectives",
    "CACHE_CONTROL_DIRECTIVE",
    "get_cache_control_directive_sdl",
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
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "LoggingCacheBackend",
    "RedisCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "InMemoryBookSource",
    "DEFAULT_BOOKS",
    # Server
    "create_app",
]
