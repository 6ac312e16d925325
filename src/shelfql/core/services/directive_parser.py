"""Parser for @cacheControl directives in GraphQL schemas."""

from dataclasses import dataclass, field
from typing import Any

from graphql import GraphQLSchema, get_named_type
from graphql.language import (
    BooleanValueNode,
    EnumValueNode,
    IntValueNode,
    StringValueNode,
    ValueNode,
)

from shelfql.core.entities.cache_control import CacheHint, CacheScope

# The @cacheControl directive definition to prepend to schemas
CACHE_CONTROL_DIRECTIVE = '''
"""Cache control directive for field and type caching configuration."""
directive @cacheControl(
  """Maximum cache age in seconds."""
  maxAge: Int
  """Cache scope: PUBLIC or PRIVATE."""
  scope: CacheControlScope
  """Inherit maxAge from parent field instead of using default."""
  inheritMaxAge: Boolean
) on FIELD_DEFINITION | OBJECT | INTERFACE | UNION

enum CacheControlScope {
  PUBLIC
  PRIVATE
}
'''


@dataclass
class SchemaDirectives:
    """Cache control directives extracted from a schema."""

    # type_name -> CacheHint
    type_hints: dict[str, CacheHint] = field(default_factory=dict)

    # "TypeName.fieldName" -> CacheHint
    field_hints: dict[str, CacheHint] = field(default_factory=dict)

    # "TypeName.fieldName" -> named return type
    field_types: dict[str, str] = field(default_factory=dict)

    def get_hint_for_field(
        self,
        type_name: str,
        field_name: str,
        parent_hint: CacheHint | None = None,
    ) -> CacheHint | None:
        """Get the cache hint for a specific field.

        Resolution order (first match wins):
        1. Field-level directive (honouring inheritMaxAge)
        2. Type-level directive on the field's return type

        Args:
            type_name: The parent type name.
            field_name: The field name.
            parent_hint: The parent field's cache hint (for inheritance).

        Returns:
            The resolved CacheHint, or None if not set.
        """
        field_key = f"{type_name}.{field_name}"

        if field_key in self.field_hints:
            hint = self.field_hints[field_key]
            if hint.inherit_max_age and parent_hint is not None:
                return CacheHint(
                    max_age=parent_hint.max_age,
                    scope=hint.scope or parent_hint.scope,
                )
            return hint

        return_type = self.field_types.get(field_key)
        if return_type is not None:
            return self.type_hints.get(return_type)
        return None

    def get_hint_for_type(self, type_name: str) -> CacheHint | None:
        return self.type_hints.get(type_name)

    def get_field_type(self, type_name: str, field_name: str) -> str | None:
        return self.field_types.get(f"{type_name}.{field_name}")


class DirectiveParser:
    """Extracts @cacheControl directives from an executable schema."""

    def parse_schema(self, schema: GraphQLSchema) -> SchemaDirectives:
        """Parse a GraphQL schema and extract cache control directives.

        Args:
            schema: The executable graphql-core schema.

        Returns:
            SchemaDirectives containing all extracted hints.
        """
        directives = SchemaDirectives()

        for type_name, type_def in schema.type_map.items():
            if type_name.startswith("__"):
                continue

            type_hint = self._extract_directive_from_node(type_def)
            if type_hint is not None:
                directives.type_hints[type_name] = type_hint

            fields = getattr(type_def, "fields", None)
            if not isinstance(fields, dict):
                continue

            for field_name, field_def in fields.items():
                field_key = f"{type_name}.{field_name}"
                field_type = getattr(field_def, "type", None)
                if field_type is not None:
                    directives.field_types[field_key] = get_named_type(field_type).name

                field_hint = self._extract_directive_from_node(field_def)
                if field_hint is not None:
                    directives.field_hints[field_key] = field_hint

        return directives

    def _extract_directive_from_node(self, node: Any) -> CacheHint | None:
        ast_node = getattr(node, "ast_node", None)
        if ast_node is None:
            return None

        for directive in getattr(ast_node, "directives", None) or ():
            if directive.name.value == "cacheControl":
                return self._parse_cache_control_directive(directive)

        return None

    def _parse_cache_control_directive(self, directive: Any) -> CacheHint:
        max_age: int | None = None
        scope: CacheScope | None = None
        inherit_max_age = False

        for arg in directive.arguments or ():
            arg_name = arg.name.value
            arg_value = self._get_argument_value(arg.value)

            if arg_name == "maxAge" and isinstance(arg_value, int):
                max_age = arg_value
            elif arg_name == "scope" and isinstance(arg_value, str):
                scope = CacheScope.parse(arg_value)
            elif arg_name == "inheritMaxAge" and isinstance(arg_value, bool):
                inherit_max_age = arg_value

        return CacheHint(
            max_age=max_age,
            scope=scope,
            inherit_max_age=inherit_max_age,
        )

    def _get_argument_value(self, value_node: ValueNode) -> Any:
        if isinstance(value_node, IntValueNode):
            return int(value_node.value)
        if isinstance(value_node, (StringValueNode, BooleanValueNode, EnumValueNode)):
            return value_node.value
        return None


def get_cache_control_directive_sdl() -> str:
    """Get the SDL definition for the @cacheControl directive."""
    return CACHE_CONTROL_DIRECTIVE
