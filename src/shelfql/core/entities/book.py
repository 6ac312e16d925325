"""Book entity."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Book:
    """A book served by the ``books`` query.

    Immutable; two books are equal when their fields are equal.
    """

    title: str
    author: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
