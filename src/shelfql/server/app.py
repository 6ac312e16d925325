"""ASGI application wiring schema, resolvers and the response cache."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from shelfql.adapters.ariadne import CachingGraphQL
from shelfql.core.entities.cache_config import Settings
from shelfql.core.exceptions import StoreUnavailableError
from shelfql.core.interfaces.book_source import IBookSource
from shelfql.core.interfaces.cache_backend import ICacheBackend
from shelfql.core.services.cache_service import CacheService
from shelfql.infrastructure.backends import (
    InMemoryCacheBackend,
    LoggingCacheBackend,
    RedisCacheBackend,
)
from shelfql.infrastructure.key_builders import DefaultKeyBuilder
from shelfql.infrastructure.serializers import JsonSerializer
from shelfql.infrastructure.sources import InMemoryBookSource
from shelfql.server.resolvers import BOOK_SOURCE_CONTEXT_KEY
from shelfql.server.schema import make_schema

logger = logging.getLogger(__name__)


class CacheHeadersMiddleware(BaseHTTPMiddleware):
    """Adds Cache-Control and X-Cache headers to responses."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        cache_header = getattr(request.state, "cache_control_header", None)
        if cache_header:
            response.headers["Cache-Control"] = cache_header

        if getattr(request.state, "cache_hit", False):
            response.headers["X-Cache"] = "HIT"

        return response


def build_backend(settings: Settings) -> ICacheBackend:
    """Create the cache backend selected by ``settings.backend``.

    Raises:
        ValueError: If the backend name is unknown.
    """
    backend: ICacheBackend
    if settings.backend == "memory":
        backend = InMemoryCacheBackend(maxsize=settings.maxsize)
    elif settings.backend == "redis":
        backend = RedisCacheBackend(
            redis_url=settings.redis_url,
            key_prefix=settings.cache.key_prefix,
        )
    else:
        raise ValueError(f"Unknown cache backend: {settings.backend!r}")

    if settings.log_cache_operations:
        backend = LoggingCacheBackend(backend)
    return backend


def session_id_from_context(context: Any) -> str | None:
    if isinstance(context, dict):
        return context.get("session_id")
    return None


def create_app(
    settings: Settings | None = None,
    backend: ICacheBackend | None = None,
    books: IBookSource | None = None,
) -> Starlette:
    """Create the book server ASGI app.

    Args:
        settings: Server settings. Read from the environment if omitted.
        backend: Cache backend, built from ``settings`` if omitted.
        books: Book source, the default catalogue if omitted.

    Returns:
        A Starlette app serving GraphQL at ``/graphql`` and ``/``.
    """
    settings = settings or Settings.from_env()
    if backend is None:
        backend = build_backend(settings)
    if books is None:
        books = InMemoryBookSource()

    cache_service = CacheService(
        backend=backend,
        # Namespacing is left to the store; see build_backend
        key_builder=DefaultKeyBuilder(prefix=""),
        serializer=JsonSerializer(),
        config=settings.cache,
    )

    def get_context_value(request: Request, data: Any = None) -> dict[str, Any]:
        return {
            "request": request,
            BOOK_SOURCE_CONTEXT_KEY: books,
            "session_id": request.headers.get("Authorization") or None,
        }

    graphql_app = CachingGraphQL(
        make_schema(),
        cache_service=cache_service,
        session_id=session_id_from_context,
        set_http_headers=settings.cache.calculate_http_headers,
        context_value=get_context_value,
        debug=settings.debug,
    )

    async def health(request: Request) -> JSONResponse:
        try:
            await backend.ping()
            store_status = "healthy"
        except StoreUnavailableError as e:
            store_status = f"unhealthy: {e}"

        return JSONResponse({
            "status": "healthy",
            "cache": store_status,
            "cache_enabled": settings.cache.enabled,
            "stats": cache_service.stats,
        })

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        logger.info("Using %s cache backend", settings.backend)
        yield
        close = getattr(backend, "close", None)
        if close is not None:
            logger.info("Closing cache backend")
            await close()

    app = Starlette(
        debug=settings.debug,
        routes=[
            Route("/health", health, methods=["GET"]),
            Mount("/graphql", graphql_app),
            Mount("/", graphql_app),
        ],
        middleware=[Middleware(CacheHeadersMiddleware)],
        lifespan=lifespan,
    )
    app.state.cache_service = cache_service
    app.state.settings = settings
    return app
