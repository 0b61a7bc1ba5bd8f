"""Pytest configuration and shared fixtures for pagewise tests."""

from typing import Any, Dict, List

import pytest
from fakeredis import FakeStrictRedis

from pagewise.pagination.links import PageLinkBuilder

# ============================================================================
# Redis Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def fake_redis_session():
    """Single FakeRedis instance for entire test session."""
    return FakeStrictRedis(decode_responses=True)


@pytest.fixture
def fake_redis(fake_redis_session):
    """
    Function-scoped fixture that clears session redis before each test.
    This ensures test isolation while using a single redis instance.
    """
    fake_redis_session.flushdb()
    yield fake_redis_session


# ============================================================================
# Pagination Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    """Request URL without query string."""
    return "http://test/api/v1/items"


@pytest.fixture
def links(base_url):
    """Link builder for a request with no extra query params."""
    return PageLinkBuilder(base_url)


@pytest.fixture
def sample_items() -> List[Dict[str, Any]]:
    """25 ordered items with an internal field."""
    return [
        {"id": i, "name": f"item-{i:02d}", "secret": f"s{i}"}
        for i in range(1, 26)
    ]


@pytest.fixture
def populate_sorted_set(fake_redis):
    """Helper to store members in a sorted set scored by position."""

    def _populate(key: str, members: List[str]):
        fake_redis.zadd(key, {member: score for score, member in enumerate(members)})

    return _populate
