"""Book data source interface."""

from typing import Protocol

from shelfql.core.entities.book import Book


class IBookSource(Protocol):
    """Read-only source of books served by the ``books`` query."""

    def all(self) -> tuple[Book, ...]:
        """Return every book in the source."""
        ...
