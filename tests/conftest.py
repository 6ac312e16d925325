"""Pytest configuration for shelfql tests."""

from datetime import timedelta

import pytest

from shelfql import (
    CacheConfig,
    CacheService,
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    JsonSerializer,
)


class FakeTimer:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def backend(timer: FakeTimer) -> InMemoryCacheBackend:
    return InMemoryCacheBackend(maxsize=100, timer=timer)


@pytest.fixture
def cache_service(backend: InMemoryCacheBackend) -> CacheService:
    """Create a cache service for testing."""
    return CacheService(
        backend=backend,
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
        config=CacheConfig(default_ttl=timedelta(minutes=5)),
    )
