"""Resolvers of the book server."""

import logging
from typing import Any

from ariadne import QueryType
from graphql import GraphQLResolveInfo

from shelfql.core.interfaces.book_source import IBookSource
from shelfql.hints import private_cache

logger = logging.getLogger(__name__)

BOOK_SOURCE_CONTEXT_KEY = "books"

query = QueryType()


@query.field("books")
def resolve_books(_: Any, info: GraphQLResolveInfo) -> list[dict[str, Any]]:
    """Return every book of the request's book source."""
    logger.info("Resolving books")
    private_cache(info, max_age=60)
    source: IBookSource = info.context[BOOK_SOURCE_CONTEXT_KEY]
    return [book.to_dict() for book in source.all()]


@query.field("hello")
def resolve_hello(*_: Any) -> str:
    return "Hello world!"


resolvers = [query]
