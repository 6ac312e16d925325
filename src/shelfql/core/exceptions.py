"""Exceptions raised by shelfql cache components."""


class CacheError(Exception):
    """Base class for cache errors."""

    pass


class StoreUnavailableError(CacheError):
    """Raised when a cache backend cannot reach its transport.

    Distinguishes "cannot check" from "not found": a missing key is
    reported as ``None``, never as this error.
    """

    def __init__(self, message: str, backend: str | None = None) -> None:
        super().__init__(message)
        self.backend = backend


class SerializationError(CacheError):
    """Raised when serialization or deserialization fails."""

    pass
