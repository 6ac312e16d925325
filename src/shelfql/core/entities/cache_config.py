"""Cache and server configuration entities."""

import os
from dataclasses import dataclass, field
from datetime import timedelta


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CacheConfig:
    """Response cache configuration.

    Cache decisions follow @cacheControl semantics: the lowest maxAge of
    all fields in a response wins and any PRIVATE field makes the whole
    response private. Root fields without a hint fall back to
    ``default_max_age``; a resulting maxAge of 0 disables caching.
    """

    enabled: bool = True
    default_ttl: timedelta | None = None
    key_prefix: str = "shelfql"  # Redis key namespace

    cache_mutations: bool = False

    default_max_age: int = 5  # seconds
    calculate_http_headers: bool = True  # Generate Cache-Control HTTP headers

    def __post_init__(self) -> None:
        """Set default TTL if not provided."""
        if self.default_ttl is None:
            self.default_ttl = timedelta(seconds=self.default_max_age)


@dataclass
class Settings:
    """Server settings.

    Built with ``Settings.from_env()`` from ``SHELFQL_*`` environment
    variables, or directly in tests.
    """

    host: str = "0.0.0.0"
    port: int = 4000
    backend: str = "memory"  # "memory" or "redis"
    redis_url: str = "redis://localhost:6379"
    maxsize: int = 1000
    log_cache_operations: bool = False
    log_level: str = "INFO"
    debug: bool = False
    cache: CacheConfig = field(default_factory=CacheConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment."""
        cache = CacheConfig(
            enabled=_env_bool("SHELFQL_CACHE_ENABLED", True),
            default_max_age=int(os.getenv("SHELFQL_DEFAULT_MAX_AGE", "5")),
            key_prefix=os.getenv("SHELFQL_KEY_PREFIX", "shelfql"),
        )
        return cls(
            host=os.getenv("SHELFQL_HOST", "0.0.0.0"),
            port=int(os.getenv("SHELFQL_PORT", "4000")),
            backend=os.getenv("SHELFQL_CACHE_BACKEND", "memory").lower(),
            redis_url=os.getenv("SHELFQL_REDIS_URL", "redis://localhost:6379"),
            maxsize=int(os.getenv("SHELFQL_CACHE_MAXSIZE", "1000")),
            log_cache_operations=_env_bool("SHELFQL_LOG_CACHE", False),
            log_level=os.getenv("SHELFQL_LOG_LEVEL", "INFO").upper(),
            debug=_env_bool("SHELFQL_DEBUG", False),
            cache=cache,
        )
