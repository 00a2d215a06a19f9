"""
Pytest configuration and shared fixtures.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio

from crawlstore.utils.logging import StoreLogger


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


# =============================================================================
# Mock Redis (using fakeredis when available)
# =============================================================================


@pytest_asyncio.fixture
async def mock_redis() -> AsyncGenerator[Any, None]:
    """
    Provide a mock Redis client for testing.

    Uses fakeredis if available, otherwise skips tests requiring Redis.
    """
    try:
        import fakeredis
        import fakeredis.aioredis

        redis = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer())
        yield redis
        await redis.aclose()
    except ImportError:
        pytest.skip("fakeredis not installed")


@pytest_asyncio.fixture
async def broken_redis() -> AsyncGenerator[Any, None]:
    """Provide a Redis client whose server refuses every command."""
    try:
        import fakeredis
        import fakeredis.aioredis
        from redis.asyncio.retry import Retry
        from redis.backoff import NoBackoff

        server = fakeredis.FakeServer()
        server.connected = False
        redis = fakeredis.aioredis.FakeRedis(server=server, retry=Retry(NoBackoff(), 0))
        yield redis
        await redis.aclose()
    except ImportError:
        pytest.skip("fakeredis not installed")


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def logger() -> StoreLogger:
    """Logger used by adapters under test."""
    return StoreLogger("tests")


@pytest.fixture
def sample_payload() -> bytes:
    """A serialized request, as the crawler would enqueue it."""
    return b'{"url": "https://example.com/page", "method": "GET", "depth": 1}'


@pytest.fixture
def sample_binary() -> bytes:
    """Binary content that is not valid UTF-8."""
    return bytes(range(256)) + b"\x00\xff\xfe"
