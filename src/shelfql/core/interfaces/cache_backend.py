"""Cache backend interface."""

from datetime import timedelta
from typing import Protocol


class ICacheBackend(Protocol):
    """Contract for key-value cache stores.

    Backends are interchangeable: the in-memory LRU store, the Redis
    store and the logging decorator all implement this protocol.
    Methods are async to support both in-memory and networked stores.
    """

    async def get(self, key: str) -> str | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached.
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value, overwriting any existing entry.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, uses backend default.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached.
        """
        ...

    async def clear(self) -> None:
        """Clear all values owned by this backend."""
        ...

    async def ping(self) -> bool:
        """Check that the backing store is reachable.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached.
        """
        ...
