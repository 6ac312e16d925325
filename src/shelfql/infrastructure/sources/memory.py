"""In-memory book source."""

from collections.abc import Iterable

from shelfql.core.entities.book import Book

DEFAULT_BOOKS: tuple[Book, ...] = (
    Book(title="The Awakening", author="Kate Chopin"),
    Book(title="City of Glass", author="Paul Auster"),
)


class InMemoryBookSource:
    """Read-only book source backed by a tuple.

    The books are copied on construction, so later changes to the
    iterable passed in are not visible through the source.
    """

    def __init__(self, books: Iterable[Book] = DEFAULT_BOOKS) -> None:
        self._books = tuple(books)

    def all(self) -> tuple[Book, ...]:
        return self._books

    def __len__(self) -> int:
        return len(self._books)
