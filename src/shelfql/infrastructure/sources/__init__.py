"""Book data sources."""

from shelfql.infrastructure.sources.memory import DEFAULT_BOOKS, InMemoryBookSource

__all__ = ["DEFAULT_BOOKS", "InMemoryBookSource"]
