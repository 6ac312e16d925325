"""Tests for domain entities."""

from datetime import datetime, timedelta, timezone

import pytest

from shelfql.core.entities import Book, CacheConfig, CacheEntry, Settings


class TestBook:
    def test_structural_equality(self) -> None:
        assert Book("City of Glass", "Paul Auster") == Book(
            title="City of Glass", author="Paul Auster"
        )

    def test_is_frozen(self) -> None:
        book = Book("City of Glass", "Paul Auster")
        with pytest.raises(AttributeError):
            book.title = "Ghosts"  # type: ignore[misc]

    def test_to_dict(self) -> None:
        assert Book("Ubik", "Philip K. Dick").to_dict() == {
            "title": "Ubik",
            "author": "Philip K. Dick",
        }


class TestCacheEntry:
    def test_create(self) -> None:
        entry = CacheEntry.create(key="k", value="v", ttl=timedelta(seconds=60))

        assert entry.key == "k"
        assert entry.value == "v"
        assert entry.created_at.tzinfo is timezone.utc
        assert entry.expires_at == entry.created_at + timedelta(seconds=60)
        assert entry.is_expired is False

    def test_no_ttl_never_expires(self) -> None:
        entry = CacheEntry.create(key="k", value="v")

        assert entry.expires_at is None
        assert entry.is_expired is False

    def test_expired(self) -> None:
        entry = CacheEntry(
            key="k",
            value="v",
            created_at=datetime.now(timezone.utc) - timedelta(minutes=2),
            ttl=timedelta(minutes=1),
        )
        assert entry.is_expired is True


class TestCacheConfig:
    def test_defaults(self) -> None:
        config = CacheConfig()

        assert config.enabled is True
        assert config.default_max_age == 5
        assert config.default_ttl == timedelta(seconds=5)
        assert config.cache_mutations is False

    def test_explicit_ttl_kept(self) -> None:
        config = CacheConfig(default_ttl=timedelta(minutes=5))
        assert config.default_ttl == timedelta(minutes=5)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.port == 4000
        assert settings.backend == "memory"
        assert settings.redis_url == "redis://localhost:6379"
        assert settings.log_cache_operations is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHELFQL_PORT", "4010")
        monkeypatch.setenv("SHELFQL_CACHE_BACKEND", "Redis")
        monkeypatch.setenv("SHELFQL_REDIS_URL", "redis://cache:6379")
        monkeypatch.setenv("SHELFQL_LOG_CACHE", "true")
        monkeypatch.setenv("SHELFQL_DEFAULT_MAX_AGE", "10")
        monkeypatch.setenv("SHELFQL_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.port == 4010
        assert settings.backend == "redis"
        assert settings.redis_url == "redis://cache:6379"
        assert settings.log_cache_operations is True
        assert settings.log_level == "DEBUG"
        assert settings.cache.default_max_age == 10
        assert settings.cache.default_ttl == timedelta(seconds=10)
