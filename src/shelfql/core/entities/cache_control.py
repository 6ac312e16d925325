"""Cache control entities.

A cache hint says how long (``max_age``) and where (``scope``) a field's
value may be reused. Hints come from @cacheControl directives in the
schema or from resolvers, and are folded into one policy per response.
"""

from dataclasses import dataclass, field
from enum import Enum


class CacheScope(Enum):
    """Cache scope for cache control.

    PUBLIC: Response can be shared between clients.
    PRIVATE: Response contains user-specific data, only cache per-user.
    """

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

    @classmethod
    def parse(cls, value: "CacheScope | str | None") -> "CacheScope | None":
        if value is None or isinstance(value, CacheScope):
            return value
        return cls(value.upper())


def _header_value(max_age: int | None, scope: CacheScope | None) -> str:
    if not max_age:
        return "no-store"
    scope_str = "private" if scope == CacheScope.PRIVATE else "public"
    return f"max-age={max_age}, {scope_str}"


@dataclass
class CacheHint:
    """Cache hint for a field or type.

    Attributes:
        max_age: Maximum cache validity in seconds. None means not set.
        scope: PUBLIC or PRIVATE scope. None means not set.
        inherit_max_age: If True, inherit maxAge from parent field.
    """

    max_age: int | None = None
    scope: CacheScope | None = None
    inherit_max_age: bool = False

    def is_set(self) -> bool:
        """Check if any cache hint value is set."""
        return self.max_age is not None or self.scope is not None

    def merge_with(self, other: "CacheHint") -> "CacheHint":
        """Merge this hint with another, keeping the most restrictive values.

        The lowest max_age wins; PRIVATE wins over PUBLIC.
        """
        if self.max_age is None:
            new_max_age = other.max_age
        elif other.max_age is None:
            new_max_age = self.max_age
        else:
            new_max_age = min(self.max_age, other.max_age)

        new_scope: CacheScope | None
        if CacheScope.PRIVATE in (self.scope, other.scope):
            new_scope = CacheScope.PRIVATE
        else:
            new_scope = self.scope or other.scope

        return CacheHint(max_age=new_max_age, scope=new_scope)

    def to_http_header(self) -> str:
        """Generate HTTP Cache-Control header value."""
        return _header_value(self.max_age, self.scope)

    @classmethod
    def from_directive(
        cls,
        max_age: int | None = None,
        scope: str | None = None,
        inherit_max_age: bool = False,
    ) -> "CacheHint":
        """Create a CacheHint from @cacheControl directive arguments."""
        return cls(
            max_age=max_age,
            scope=CacheScope.parse(scope),
            inherit_max_age=inherit_max_age,
        )


@dataclass
class FieldCacheHint:
    """Cache hint recorded for a response path.

    ``source`` is "schema", "type" or "resolver".
    """

    path: tuple[str, ...]
    hint: CacheHint
    source: str = "schema"

    @property
    def path_string(self) -> str:
        return ".".join(self.path)


@dataclass
class ResponseCachePolicy:
    """Overall cache policy for a GraphQL response."""

    max_age: int
    scope: CacheScope
    field_hints: list[FieldCacheHint] = field(default_factory=list)

    @property
    def is_cacheable(self) -> bool:
        return self.max_age > 0

    def to_http_header(self) -> str:
        """Generate HTTP Cache-Control header value."""
        return _header_value(self.max_age, self.scope)

    @classmethod
    def from_hints(
        cls,
        hints: list[FieldCacheHint],
        default_max_age: int = 0,
    ) -> "ResponseCachePolicy":
        """Fold field hints into a response policy.

        Args:
            hints: List of field cache hints.
            default_max_age: max_age used when no hint sets one.

        Returns:
            The calculated ResponseCachePolicy.
        """
        merged = CacheHint()
        for field_hint in hints:
            merged = merged.merge_with(field_hint.hint)

        return cls(
            max_age=merged.max_age if merged.max_age is not None else default_max_age,
            scope=merged.scope or CacheScope.PUBLIC,
            field_hints=list(hints),
        )
