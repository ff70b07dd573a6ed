"""Shared pytest fixtures for the cachestore test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import fakeredis
import pytest
import structlog

from cachestore.models.cache import StoreConfig
from cachestore.providers.cache.redis_store import RedisCacheStore


# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_client() -> fakeredis.FakeAsyncRedis:
    """A fresh in-memory engine with its own private server."""
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def mock_client() -> MagicMock:
    """An engine double whose commands are AsyncMocks returning Redis-like acks."""
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.setex = AsyncMock(return_value=True)
    client.mset = AsyncMock(return_value=True)
    client.mget = AsyncMock(return_value=[])
    client.delete = AsyncMock(return_value=0)
    client.keys = AsyncMock(return_value=[])
    client.ttl = AsyncMock(return_value=-2)
    client.flushdb = AsyncMock(return_value=True)

    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    client.pipeline.return_value.__aenter__ = AsyncMock(return_value=pipe)
    client.pipeline.return_value.__aexit__ = AsyncMock(return_value=False)
    client.pipe = pipe
    return client


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


@pytest.fixture
def store(memory_client: fakeredis.FakeAsyncRedis) -> RedisCacheStore:
    """A store over the in-memory engine with no default TTL."""
    return RedisCacheStore(memory_client, name="redis-mock")


@pytest.fixture
def make_store(
    memory_client: fakeredis.FakeAsyncRedis,
) -> Callable[..., RedisCacheStore]:
    """Factory building a store over the shared in-memory engine with a given config."""

    def _make(config: StoreConfig | Mapping[str, Any] | None = None) -> RedisCacheStore:
        return RedisCacheStore(memory_client, config=config, name="redis-mock")

    return _make


@pytest.fixture
def mocked_store(mock_client: MagicMock) -> RedisCacheStore:
    """A store over the AsyncMock engine, for asserting exact engine commands."""
    return RedisCacheStore(mock_client, name="redis-mock")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging() -> Iterator[logging.Logger]:
    """Yield the root logger and undo any logging reconfiguration afterwards."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers
    structlog.reset_defaults()
