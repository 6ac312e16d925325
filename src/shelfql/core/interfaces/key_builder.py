"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for deriving cache keys from a GraphQL request.

    The same operation name, query text and variables must always map
    to the same key; anything that differs must map to a different one.
    """

    def build(
        self,
        operation_name: str | None,
        query: str,
        variables: dict[str, Any] | None,
        context: dict[str, Any] | None = None,
    ) -> str:
        """Build the cache key for a GraphQL operation.

        Args:
            operation_name: Name of the GraphQL operation (may be None).
            query: The GraphQL query string.
            variables: Variables passed to the operation.
            context: Extra key material, e.g. the session id of a
                private response.

        Returns:
            The cache key.
        """
        ...
