"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class CacheEntry:
    """Record of a value written to a cache backend.

    The backend owns the stored copy; this object only describes what
    was written and when it stops being readable.
    """

    key: str
    value: str
    created_at: datetime
    ttl: timedelta | None = None

    @property
    def expires_at(self) -> datetime | None:
        """The datetime when this entry expires, or None if no TTL."""
        if self.ttl is None:
            return None
        return self.created_at + self.ttl

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        return datetime.now(timezone.utc) > self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: str,
        ttl: timedelta | None = None,
    ) -> "CacheEntry":
        """Factory method stamping the entry with the current time.

        Args:
            key: The cache key.
            value: The serialized value.
            ttl: Optional time-to-live.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            created_at=datetime.now(timezone.utc),
            ttl=ttl,
        )
