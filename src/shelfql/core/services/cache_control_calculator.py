"""Cache control calculator service.

Calculates the overall cache policy for a GraphQL response by walking
the response data and aggregating cache hints from schema directives
and resolver-level hints.

- maxAge: the LOWEST value across all fields wins
- scope: PRIVATE if ANY field specifies PRIVATE
- root fields with no hint at all fall back to the default maxAge
"""

from dataclasses import dataclass, field
from typing import Any

from shelfql.core.entities.cache_control import (
    CacheHint,
    CacheScope,
    FieldCacheHint,
    ResponseCachePolicy,
)
from shelfql.core.services.directive_parser import SchemaDirectives


@dataclass
class CacheControlContext:
    """Per-request collector for hints set by resolvers.

    One context is injected into the GraphQL context of every request;
    resolvers reach it through ``shelfql.hints.set_cache_hint``.
    """

    schema_directives: SchemaDirectives = field(default_factory=SchemaDirectives)
    resolver_hints: list[FieldCacheHint] = field(default_factory=list)
    default_max_age: int = 0

    def set_cache_hint(
        self,
        max_age: int | None = None,
        scope: CacheScope | str | None = None,
        path: tuple[str, ...] = (),
    ) -> None:
        """Record a cache hint for the field at ``path``.

        Args:
            max_age: Maximum cache age in seconds.
            scope: Cache scope (PUBLIC, PRIVATE, or string).
            path: Response path of the field the resolver serves.
        """
        hint = CacheHint(max_age=max_age, scope=CacheScope.parse(scope))
        self.resolver_hints.append(
            FieldCacheHint(path=tuple(path), hint=hint, source="resolver")
        )

    def hinted_root_fields(self) -> set[str]:
        """Names of root fields that received a resolver hint with a maxAge."""
        return {
            h.path[0]
            for h in self.resolver_hints
            if h.path and h.hint.max_age is not None
        }


class CacheControlCalculator:
    """Calculates cache policy for GraphQL responses."""

    def __init__(
        self,
        schema_directives: SchemaDirectives | None = None,
        default_max_age: int = 0,
    ) -> None:
        """Initialize the calculator.

        Args:
            schema_directives: Pre-parsed schema directives.
            default_max_age: Default maxAge for root fields without hints.
        """
        self._schema_directives = schema_directives or SchemaDirectives()
        self._default_max_age = default_max_age

    @property
    def schema_directives(self) -> SchemaDirectives:
        return self._schema_directives

    def calculate_policy(
        self,
        data: Any,
        type_info: dict[str, str] | None = None,
        context: CacheControlContext | None = None,
    ) -> ResponseCachePolicy:
        """Calculate the cache policy for a response.

        Args:
            data: The ``data`` member of the GraphQL response.
            type_info: Optional mapping of field paths to type names.
            context: Cache control context holding resolver hints.

        Returns:
            The calculated ResponseCachePolicy.
        """
        hints: list[FieldCacheHint] = []

        self._collect_hints_from_data(
            data=data,
            path=[],
            parent_type="Query",
            parent_hint=None,
            hints=hints,
            type_info=type_info or {},
        )

        hinted = {h.path[0] for h in hints if h.path and h.hint.max_age is not None}
        if context is not None:
            hints.extend(context.resolver_hints)
            hinted |= context.hinted_root_fields()

        if isinstance(data, dict):
            for field_name in data:
                if field_name not in hinted and field_name != "__typename":
                    hints.append(FieldCacheHint(
                        path=(field_name,),
                        hint=CacheHint(max_age=self._default_max_age),
                        source="default",
                    ))

        return ResponseCachePolicy.from_hints(hints, self._default_max_age)

    def _collect_hints_from_data(
        self,
        data: Any,
        path: list[str],
        parent_type: str,
        parent_hint: CacheHint | None,
        hints: list[FieldCacheHint],
        type_info: dict[str, str],
    ) -> None:
        if data is None:
            return

        if isinstance(data, dict):
            type_name = data.get("__typename")
            if type_name is None:
                type_name = type_info.get(".".join(path), parent_type)

            type_hint = self._schema_directives.get_hint_for_type(type_name)
            if type_hint is not None:
                hints.append(FieldCacheHint(
                    path=tuple(path) if path else ("$root",),
                    hint=type_hint,
                    source="type",
                ))

            for field_name, field_value in data.items():
                if field_name == "__typename":
                    continue

                field_path = [*path, field_name]
                field_hint = self._schema_directives.get_hint_for_field(
                    type_name=type_name,
                    field_name=field_name,
                    parent_hint=parent_hint,
                )
                if field_hint is not None:
                    hints.append(FieldCacheHint(
                        path=tuple(field_path),
                        hint=field_hint,
                        source="schema",
                    ))

                child_type = type_info.get(
                    ".".join(field_path),
                    self._schema_directives.get_field_type(type_name, field_name)
                    or type_name,
                )
                self._collect_hints_from_data(
                    data=field_value,
                    path=field_path,
                    parent_type=child_type,
                    parent_hint=field_hint,
                    hints=hints,
                    type_info=type_info,
                )

        elif isinstance(data, list):
            # List items share the list field's path
            for item in data:
                self._collect_hints_from_data(
                    data=item,
                    path=path,
                    parent_type=parent_type,
                    parent_hint=parent_hint,
                    hints=hints,
                    type_info=type_info,
                )


def create_cache_control_context(
    schema_directives: SchemaDirectives | None = None,
    default_max_age: int = 0,
) -> CacheControlContext:
    """Create a cache control context for one request."""
    return CacheControlContext(
        schema_directives=schema_directives or SchemaDirectives(),
        default_max_age=default_max_age,
    )
