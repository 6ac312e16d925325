"""Caching GraphQL ASGI app for Ariadne."""

from collections.abc import Callable
from typing import Any

from ariadne.asgi import GraphQL
from graphql import GraphQLSchema

from shelfql.adapters.ariadne.handler import CachingGraphQLHTTPHandler
from shelfql.core.services.cache_service import CacheService


class CachingGraphQL(GraphQL):
    """Ariadne's GraphQL ASGI app with response caching.

    Example::

        app = CachingGraphQL(
            schema,
            cache_service=cache_service,
            session_id=lambda ctx: ctx.get("session_id"),
        )
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        cache_service: CacheService,
        should_cache: Callable[[dict[str, Any]], bool] | None = None,
        session_id: Callable[[Any], str | None] | None = None,
        set_http_headers: bool = True,
        **kwargs: Any,
    ) -> None:
        http_handler = CachingGraphQLHTTPHandler(
            cache_service=cache_service,
            schema=schema,
            should_cache=should_cache,
            session_id=session_id,
            set_http_headers=set_http_headers,
        )

        super().__init__(schema, http_handler=http_handler, **kwargs)

        self._cache_service = cache_service

    @property
    def cache_service(self) -> CacheService:
        return self._cache_service

    @property
    def cache_stats(self) -> dict[str, int]:
        return self._cache_service.stats
