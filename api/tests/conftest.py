"""Pytest configuration and shared fixtures for Newsdesk tests."""

from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from fakeredis import FakeStrictRedis
from fastapi.testclient import TestClient

from newsdesk.models.news import News
from newsdesk.repositories.news import NewsRepository

# ============================================================================
# Redis Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def fake_redis_session():
    """Single FakeRedis instance for entire test session."""
    return FakeStrictRedis(decode_responses=True)


@pytest.fixture(autouse=True)
def fake_redis(fake_redis_session):
    """
    Function-scoped fixture that clears session redis before each test.
    This ensures test isolation while using a single redis instance.
    """
    fake_redis_session.flushdb()
    yield fake_redis_session


# ============================================================================
# News Fixtures
# ============================================================================


@pytest.fixture
def news_repository(fake_redis):
    """News repository on fake Redis."""
    return NewsRepository(fake_redis)


@pytest.fixture
def sample_news() -> List[News]:
    """Twenty news records, News1..News20, published one day apart."""
    published = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    return [
        News(
            uid=uid,
            title=f"News{uid}",
            teaser=f"Teaser of news {uid}",
            author="Editorial",
            published_at=published + timedelta(days=uid),
        )
        for uid in range(1, 21)
    ]


@pytest.fixture
def populated_repository(news_repository, sample_news):
    """News repository holding the twenty sample records."""
    for news in sample_news:
        news_repository.add(news)
    return news_repository


# ============================================================================
# API Test Client Fixtures
# ============================================================================


@pytest.fixture
def test_client(fake_redis, news_repository):
    """Provide a test client with Redis replaced by fake Redis."""
    from newsdesk.api.dependencies import get_news_repository
    from newsdesk.api.v1.endpoints.health import get_readiness_redis
    from newsdesk.main import app

    app.dependency_overrides[get_news_repository] = lambda: news_repository
    app.dependency_overrides[get_readiness_redis] = lambda: fake_redis

    yield TestClient(app)

    app.dependency_overrides.clear()


# ============================================================================
# Utility Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_lru_caches():
    """Reset LRU caches between tests."""
    from newsdesk.config.settings import get_settings
    from newsdesk.db.redis import get_redis_client, get_redis_pool

    get_settings.cache_clear()
    get_redis_client.cache_clear()
    get_redis_pool.cache_clear()

    yield

    get_settings.cache_clear()
    get_redis_client.cache_clear()
    get_redis_pool.cache_clear()


# ============================================================================
# Markers
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "redis: Redis-dependent tests")
