"""Book GraphQL server."""

from shelfql.server.app import build_backend, create_app
from shelfql.server.resolvers import resolvers
from shelfql.server.schema import TYPE_DEFS, make_schema

__all__ = [
    "TYPE_DEFS",
    "build_backend",
    "create_app",
    "make_schema",
    "resolvers",
]
