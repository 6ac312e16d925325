"""GraphQL schema of the book server."""

from ariadne import make_executable_schema
from graphql import GraphQLSchema

from shelfql.core.services.directive_parser import get_cache_control_directive_sdl
from shelfql.server.resolvers import resolvers

TYPE_DEFS = get_cache_control_directive_sdl() + """
\"\"\"A book in the catalogue.\"\"\"
type Book {
    title: String
    author: String
}

type Query {
    \"\"\"
    All books.
    The resolver marks the result PRIVATE with a maxAge of 60 seconds.
    \"\"\"
    books: [Book]

    \"\"\"Greeting, shared by every client for 30 seconds.\"\"\"
    hello: String @cacheControl(maxAge: 30)
}
"""


def make_schema() -> GraphQLSchema:
    return make_executable_schema(TYPE_DEFS, *resolvers)
