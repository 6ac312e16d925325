"""Caching HTTP handler for Ariadne GraphQL."""

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from ariadne.asgi.handlers import GraphQLHTTPHandler
from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    OperationType,
    get_operation_ast,
    parse,
)

from shelfql.core.entities.cache_control import CacheScope, ResponseCachePolicy
from shelfql.core.services.cache_control_calculator import (
    CacheControlCalculator,
    create_cache_control_context,
)
from shelfql.core.services.cache_service import CacheService
from shelfql.core.services.directive_parser import DirectiveParser, SchemaDirectives
from shelfql.hints import inject_cache_control_context

logger = logging.getLogger(__name__)


class CachingGraphQLHTTPHandler(GraphQLHTTPHandler):
    """HTTP handler that adds response caching to Ariadne.

    Looks the response up in the cache before execution and stores it
    afterwards, with the TTL taken from the response's cache policy.
    Entries keep that policy so hits repeat the original Cache-Control.

    Scope handling via the ``session_id`` callback:
    - PUBLIC responses are cached with a shared key (no session context).
    - PRIVATE responses are cached per-user using the session_id.
    - PRIVATE responses without a session_id are not cached.
    """

    def __init__(
        self,
        cache_service: CacheService,
        schema: GraphQLSchema | None = None,
        should_cache: Callable[[dict[str, Any]], bool] | None = None,
        session_id: Callable[[Any], str | None] | None = None,
        set_http_headers: bool = True,
    ) -> None:
        super().__init__()
        self._cache_service = cache_service
        self._should_cache = should_cache
        self._session_id = session_id
        self._set_http_headers = set_http_headers
        self._default_max_age = cache_service.config.default_max_age

        self._schema_directives = SchemaDirectives()
        if schema is not None:
            self._schema_directives = DirectiveParser().parse_schema(schema)

        self._calculator = CacheControlCalculator(
            schema_directives=self._schema_directives,
            default_max_age=self._default_max_age,
        )

    def _get_session_id(self, context_value: Any) -> str | None:
        if self._session_id is None:
            return None
        return self._session_id(context_value)

    def _is_mutation(
        self,
        query: str,
        operation_name: str | None,
        query_document: DocumentNode | None = None,
    ) -> bool:
        if query_document is None:
            if not isinstance(query, str):
                return False
            try:
                query_document = parse(query)
            except GraphQLError:
                # Left for execution to report
                return False
        operation = get_operation_ast(query_document, operation_name)
        return operation is not None and operation.operation == OperationType.MUTATION

    async def execute_graphql_query(
        self,
        request: Any,
        data: Any,
        *,
        context_value: Any = None,
        query_document: Any = None,
    ) -> tuple[bool, dict[str, Any]]:
        if not isinstance(data, dict):
            return await super().execute_graphql_query(
                request, data,
                context_value=context_value,
                query_document=query_document,
            )

        query = data.get("query") or ""
        variables = data.get("variables")
        operation_name = data.get("operationName")

        if not self._cache_service.config.cache_mutations and self._is_mutation(
            query, operation_name, query_document
        ):
            logger.debug("Skipping cache for mutation")
            return await super().execute_graphql_query(
                request, data,
                context_value=context_value,
                query_document=query_document,
            )

        if self._should_cache and not self._should_cache(data):
            logger.debug("Skipping cache per should_cache callback")
            return await super().execute_graphql_query(
                request, data,
                context_value=context_value,
                query_document=query_document,
            )

        # Resolve context before cache lookup so session_id is available
        if context_value is None:
            context_value = await self.get_context_for_request(request, data)

        sid = self._get_session_id(context_value)

        # Private key first (if sid), then public key
        if sid is not None:
            cached = await self._cache_service.get_cached_response(
                operation_name=operation_name,
                query=query,
                variables=variables,
                context={"session_id": sid},
            )
            hit = self._unwrap(cached)
            if hit is not None:
                logger.debug("HIT (private) %s", operation_name or "<anonymous>")
                return True, self._serve_hit(request, *hit)

        cached = await self._cache_service.get_cached_response(
            operation_name=operation_name,
            query=query,
            variables=variables,
            context=None,
        )
        hit = self._unwrap(cached)
        if hit is not None:
            logger.debug("HIT (public) %s", operation_name or "<anonymous>")
            return True, self._serve_hit(request, *hit)

        logger.debug("MISS %s", operation_name or "<anonymous>")

        cache_control = create_cache_control_context(
            schema_directives=self._schema_directives,
            default_max_age=self._default_max_age,
        )
        if isinstance(context_value, dict):
            inject_cache_control_context(context_value, cache_control)

        success, response = await super().execute_graphql_query(
            request, data, context_value=context_value, query_document=query_document
        )

        if success and isinstance(response, dict) and not response.get("errors"):
            policy = self._calculator.calculate_policy(
                data=response.get("data"),
                context=cache_control,
            )

            if policy.is_cacheable:
                await self._store(
                    policy, sid, operation_name, query, variables, response
                )

            if self._set_http_headers:
                self._set_cache_headers(request, policy)

        return success, response

    async def _store(
        self,
        policy: ResponseCachePolicy,
        sid: str | None,
        operation_name: str | None,
        query: str,
        variables: dict[str, Any] | None,
        response: dict[str, Any],
    ) -> None:
        context: dict[str, Any] | None = None
        if policy.scope == CacheScope.PRIVATE:
            if sid is None:
                logger.debug("PRIVATE response not cached: no session_id available")
                return
            context = {"session_id": sid}

        await self._cache_service.cache_response(
            operation_name=operation_name,
            query=query,
            variables=variables,
            response={
                "response": response,
                "max_age": policy.max_age,
                "scope": policy.scope.value,
            },
            ttl=timedelta(seconds=policy.max_age),
            context=context,
        )
        logger.debug(
            "Cached %s response (TTL: %ss)", policy.scope.value.lower(), policy.max_age
        )

    def _unwrap(self, cached: Any) -> tuple[dict[str, Any], ResponseCachePolicy] | None:
        """Split a stored entry into the response and the policy it was cached under."""
        if not isinstance(cached, dict) or "response" not in cached:
            return None
        try:
            policy = ResponseCachePolicy(
                max_age=int(cached["max_age"]),
                scope=CacheScope(cached["scope"]),
            )
        except (KeyError, TypeError, ValueError):
            return None
        return cached["response"], policy

    def _serve_hit(
        self,
        request: Any,
        response: dict[str, Any],
        policy: ResponseCachePolicy,
    ) -> dict[str, Any]:
        if hasattr(request, "state"):
            request.state.cache_hit = True
        if self._set_http_headers:
            self._set_cache_headers(request, policy)
        return response

    def _set_cache_headers(self, request: Any, policy: ResponseCachePolicy) -> None:
        header = policy.to_http_header()
        if hasattr(request, "state"):
            request.state.cache_control_header = header
        logger.debug("Cache-Control: %s", header)
