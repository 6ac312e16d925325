"""Default key builder implementation."""

from typing import Any

from shelfql.utils.hashing import hash_value, normalize_query


class DefaultKeyBuilder:
    """Builds cache keys from hashes of the query, variables and context.

    Keys look like ``prefix[:operation]:q:<hash>[:v:<hash>][:c:<hash>]``;
    an empty prefix is left out.
    Queries differing only in whitespace share a key.
    """

    def __init__(
        self,
        prefix: str = "shelfql",
        include_operation_name: bool = True,
    ) -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all cache keys.
            include_operation_name: Whether to include operation name in key.
        """
        self._prefix = prefix
        self._include_operation_name = include_operation_name

    def build(
        self,
        operation_name: str | None,
        query: str,
        variables: dict[str, Any] | None,
        context: dict[str, Any] | None = None,
    ) -> str:
        parts = [self._prefix] if self._prefix else []

        if self._include_operation_name and operation_name:
            parts.append(operation_name)

        parts.append(f"q:{hash_value(normalize_query(query))}")

        if variables:
            parts.append(f"v:{hash_value(variables)}")

        if context:
            parts.append(f"c:{hash_value(context)}")

        return ":".join(parts)
