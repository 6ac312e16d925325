"""Unit tests for CachingGraphQLHTTPHandler."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from shelfql.adapters.ariadne.handler import CachingGraphQLHTTPHandler
from shelfql.core.entities.cache_config import CacheConfig
from shelfql.core.entities.cache_control import CacheScope, ResponseCachePolicy
from shelfql.core.services.cache_control_calculator import CacheControlContext
from shelfql.core.services.directive_parser import SchemaDirectives
from shelfql.hints import CACHE_CONTROL_CONTEXT_KEY

BOOKS_QUERY = "query { books { title } }"
BOOKS_RESPONSE = {"data": {"books": [{"title": "City of Glass"}]}}


def _stored(response=BOOKS_RESPONSE, max_age=60, scope="PUBLIC") -> dict:
    return {"response": response, "max_age": max_age, "scope": scope}


def _make_handler(
    session_id=None,
    policy: ResponseCachePolicy | None = None,
) -> CachingGraphQLHTTPHandler:
    """Create a handler with a mock cache service and calculator."""
    svc = MagicMock()
    svc.config = CacheConfig()
    svc.get_cached_response = AsyncMock(return_value=None)
    svc.cache_response = AsyncMock()

    handler = object.__new__(CachingGraphQLHTTPHandler)
    handler._cache_service = svc
    handler._should_cache = None
    handler._session_id = session_id
    handler._set_http_headers = True
    handler._default_max_age = 5
    handler._schema_directives = SchemaDirectives()

    handler._calculator = MagicMock()
    handler._calculator.calculate_policy.return_value = policy or ResponseCachePolicy(
        max_age=60, scope=CacheScope.PUBLIC
    )

    return handler


def _request() -> MagicMock:
    request = MagicMock()
    request.state = MagicMock()
    return request


def _execute_returns(result):
    return patch.object(
        CachingGraphQLHTTPHandler.__bases__[0],
        "execute_graphql_query",
        new_callable=AsyncMock,
        return_value=result,
    )


class TestLookup:
    @pytest.mark.asyncio
    async def test_private_hit(self):
        handler = _make_handler(session_id=lambda ctx: "alice")
        handler._cache_service.get_cached_response = AsyncMock(
            side_effect=[_stored(scope="PRIVATE")]
        )
        request = _request()

        success, result = await handler.execute_graphql_query(
            request, {"query": BOOKS_QUERY}, context_value={}
        )

        assert success is True
        assert result == BOOKS_RESPONSE
        assert request.state.cache_hit is True
        assert request.state.cache_control_header == "max-age=60, private"
        handler._cache_service.get_cached_response.assert_awaited_once_with(
            operation_name=None,
            query=BOOKS_QUERY,
            variables=None,
            context={"session_id": "alice"},
        )

    @pytest.mark.asyncio
    async def test_public_hit_after_private_miss(self):
        handler = _make_handler(session_id=lambda ctx: "alice")
        handler._cache_service.get_cached_response = AsyncMock(
            side_effect=[None, _stored()]
        )

        success, result = await handler.execute_graphql_query(
            _request(), {"query": BOOKS_QUERY}, context_value={}
        )

        assert result == BOOKS_RESPONSE
        calls = handler._cache_service.get_cached_response.call_args_list
        assert calls[0].kwargs["context"] == {"session_id": "alice"}
        assert calls[1].kwargs["context"] is None

    @pytest.mark.asyncio
    async def test_no_sid_skips_private_lookup(self):
        handler = _make_handler(session_id=None)
        handler._cache_service.get_cached_response = AsyncMock(
            return_value=_stored()
        )

        await handler.execute_graphql_query(
            _request(), {"query": BOOKS_QUERY}, context_value={}
        )

        handler._cache_service.get_cached_response.assert_awaited_once_with(
            operation_name=None,
            query=BOOKS_QUERY,
            variables=None,
            context=None,
        )

    @pytest.mark.asyncio
    async def test_mutation_bypasses_cache(self):
        handler = _make_handler()
        data = {"query": "mutation { addBook { title } }"}

        with _execute_returns((True, {"data": {}})) as execute:
            await handler.execute_graphql_query(_request(), data)

        execute.assert_awaited_once()
        handler._cache_service.get_cached_response.assert_not_called()
        handler._cache_service.cache_response.assert_not_called()

    @pytest.mark.asyncio
    async def test_mutation_after_comment_bypasses_cache(self):
        handler = _make_handler()
        data = {"query": "# add a book\nmutation { addBook { title } }"}

        with _execute_returns((True, {"data": {}})) as execute:
            await handler.execute_graphql_query(_request(), data)

        execute.assert_awaited_once()
        handler._cache_service.get_cached_response.assert_not_called()

    @pytest.mark.asyncio
    async def test_selected_operation_decides_mutation(self):
        handler = _make_handler()
        query = "query Books { books { title } } mutation Add { addBook { title } }"

        with _execute_returns((True, {"data": {}})):
            await handler.execute_graphql_query(
                _request(), {"query": query, "operationName": "Add"}
            )
        handler._cache_service.get_cached_response.assert_not_called()

        with _execute_returns((True, BOOKS_RESPONSE)):
            await handler.execute_graphql_query(
                _request(),
                {"query": query, "operationName": "Books"},
                context_value={},
            )
        handler._cache_service.get_cached_response.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_public_hit_sets_cache_control(self):
        handler = _make_handler()
        handler._cache_service.get_cached_response = AsyncMock(
            return_value=_stored(max_age=30)
        )
        request = _request()

        with _execute_returns((True, {})) as execute:
            success, result = await handler.execute_graphql_query(
                request, {"query": BOOKS_QUERY}, context_value={}
            )

        execute.assert_not_awaited()
        assert result == BOOKS_RESPONSE
        assert request.state.cache_control_header == "max-age=30, public"

    @pytest.mark.asyncio
    async def test_unreadable_entry_is_a_miss(self):
        handler = _make_handler()
        handler._cache_service.get_cached_response = AsyncMock(
            return_value={"data": {"books": []}}
        )

        with _execute_returns((True, BOOKS_RESPONSE)) as execute:
            success, result = await handler.execute_graphql_query(
                _request(), {"query": BOOKS_QUERY}, context_value={}
            )

        execute.assert_awaited_once()
        assert result == BOOKS_RESPONSE

    @pytest.mark.asyncio
    async def test_should_cache_callback(self):
        handler = _make_handler()
        handler._should_cache = lambda data: "hello" not in data["query"]

        with _execute_returns((True, {"data": {"hello": "hi"}})):
            await handler.execute_graphql_query(
                _request(), {"query": "{ hello }"}, context_value={}
            )

        handler._cache_service.get_cached_response.assert_not_called()


class TestStore:
    @pytest.mark.asyncio
    async def test_injects_cache_control_context(self):
        handler = _make_handler()
        context_value: dict = {}

        with _execute_returns((True, BOOKS_RESPONSE)):
            await handler.execute_graphql_query(
                _request(), {"query": BOOKS_QUERY}, context_value=context_value
            )

        cache_control = context_value[CACHE_CONTROL_CONTEXT_KEY]
        assert isinstance(cache_control, CacheControlContext)
        handler._calculator.calculate_policy.assert_called_once_with(
            data=BOOKS_RESPONSE["data"], context=cache_control
        )

    @pytest.mark.asyncio
    async def test_public_scope_stores_with_ttl(self):
        handler = _make_handler(session_id=lambda ctx: "alice")
        request = _request()

        with _execute_returns((True, BOOKS_RESPONSE)):
            await handler.execute_graphql_query(
                request, {"query": BOOKS_QUERY}, context_value={}
            )

        call_kwargs = handler._cache_service.cache_response.call_args.kwargs
        assert call_kwargs["context"] is None
        assert call_kwargs["ttl"] == timedelta(seconds=60)
        assert call_kwargs["response"] == _stored()
        assert request.state.cache_control_header == "max-age=60, public"

    @pytest.mark.asyncio
    async def test_private_scope_stores_per_session(self):
        handler = _make_handler(
            session_id=lambda ctx: "alice",
            policy=ResponseCachePolicy(max_age=60, scope=CacheScope.PRIVATE),
        )
        request = _request()

        with _execute_returns((True, BOOKS_RESPONSE)):
            await handler.execute_graphql_query(
                request, {"query": BOOKS_QUERY}, context_value={}
            )

        call_kwargs = handler._cache_service.cache_response.call_args.kwargs
        assert call_kwargs["context"] == {"session_id": "alice"}
        assert request.state.cache_control_header == "max-age=60, private"

    @pytest.mark.asyncio
    async def test_private_scope_without_sid_skips_store(self):
        handler = _make_handler(
            session_id=None,
            policy=ResponseCachePolicy(max_age=60, scope=CacheScope.PRIVATE),
        )
        request = _request()

        with _execute_returns((True, BOOKS_RESPONSE)):
            await handler.execute_graphql_query(
                request, {"query": BOOKS_QUERY}, context_value={}
            )

        handler._cache_service.cache_response.assert_not_called()
        assert request.state.cache_control_header == "max-age=60, private"

    @pytest.mark.asyncio
    async def test_not_cacheable_skips_store(self):
        handler = _make_handler(
            policy=ResponseCachePolicy(max_age=0, scope=CacheScope.PUBLIC)
        )
        request = _request()

        with _execute_returns((True, BOOKS_RESPONSE)):
            await handler.execute_graphql_query(
                request, {"query": BOOKS_QUERY}, context_value={}
            )

        handler._cache_service.cache_response.assert_not_called()
        assert request.state.cache_control_header == "no-store"

    @pytest.mark.asyncio
    async def test_errors_are_not_cached(self):
        handler = _make_handler()
        response = {"data": None, "errors": [{"message": "boom"}]}

        with _execute_returns((True, response)):
            success, result = await handler.execute_graphql_query(
                _request(), {"query": BOOKS_QUERY}, context_value={}
            )

        assert result == response
        handler._cache_service.cache_response.assert_not_called()
        handler._calculator.calculate_policy.assert_not_called()
