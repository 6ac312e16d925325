"""Ariadne framework adapter for shelfql."""

from shelfql.adapters.ariadne.graphql import CachingGraphQL
from shelfql.adapters.ariadne.handler import CachingGraphQLHTTPHandler

__all__ = [
    "CachingGraphQL",
    "CachingGraphQLHTTPHandler",
]
