"""Store assembly: the only place that knows which engine backs the cache.

Engine selection mirrors the rest of the configuration: a ``REDIS_URL``
selects a real Redis server through ``redis.asyncio``; without one the
store runs on an in-memory ``fakeredis`` engine with its own private
server, so two stores built here never share keys.

Usage::

    from cachestore.main import build_store, redis_mock_store

    store = await redis_mock_store({"ttl": 60})
    await store.set("x", {"a": 1})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import fakeredis
import redis.asyncio as redis
import structlog

from cachestore.config import Settings, load_config, settings
from cachestore.models.cache import StoreConfig
from cachestore.providers.cache.redis_store import RedisCacheStore
from cachestore.utils.errors import ConfigurationError
from cachestore.utils.logging import configure_logging, get_logger

MEMORY_ENGINE_NAME = "redis-mock"
SERVER_ENGINE_NAME = "redis"

logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Engine factories
# ---------------------------------------------------------------------------


def _build_memory_engine() -> fakeredis.FakeAsyncRedis:
    # A private FakeServer per engine; fakeredis otherwise shares state
    # between clients created with the same connection parameters.
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


def _build_server_engine(url: str) -> redis.Redis:
    try:
        return redis.from_url(url, decode_responses=True)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid Redis URL {url!r}: {exc}", provider_name=SERVER_ENGINE_NAME
        ) from exc


def build_engine(app_settings: Settings) -> tuple[Any, str]:
    """Return ``(client, engine_name)`` for the configured engine."""
    if app_settings.uses_memory_engine():
        return _build_memory_engine(), MEMORY_ENGINE_NAME
    return _build_server_engine(app_settings.redis_url), SERVER_ENGINE_NAME


# ---------------------------------------------------------------------------
# Store factories
# ---------------------------------------------------------------------------


async def redis_mock_store(
    config: StoreConfig | Mapping[str, Any] | None = None,
) -> RedisCacheStore:
    """Build a store over a fresh in-memory engine.

    Args:
        config: Default ``ttl`` and optional ``is_cacheable_value`` predicate.
    """
    return RedisCacheStore(_build_memory_engine(), config=config, name=MEMORY_ENGINE_NAME)


async def build_store(
    app_settings: Settings | None = None,
    config: StoreConfig | Mapping[str, Any] | None = None,
) -> RedisCacheStore:
    """Build a store on the engine selected by *app_settings*.

    Logging is (re)configured from ``app_settings.log_level`` and
    ``app_settings.app_env`` first.

    Args:
        app_settings: Application settings; the module-level ``settings`` if omitted.
        config: Store config.  Defaults to ``ttl=app_settings.cache_default_ttl``.
    """
    app_settings = app_settings or settings
    configure_logging(log_level=app_settings.log_level, app_env=app_settings.app_env)
    if config is None:
        config = StoreConfig(ttl=app_settings.cache_default_ttl)

    client, name = build_engine(app_settings)
    store = RedisCacheStore(client, config=config, name=name)
    logger.info("cache_store_built", engine=name, default_ttl=store.config.ttl)
    return store


async def build_store_from_config(path: str = "config/config.yaml") -> RedisCacheStore:
    """Build a store from the layered YAML + environment configuration."""
    resolved = load_config(path)
    app_settings = Settings(
        redis_url=resolved["engine"].get("url") or "",
        cache_default_ttl=resolved["store"].get("ttl"),
        log_level=resolved["logging"].get("level", "INFO"),
    )
    return await build_store(app_settings, config=resolved["store"])


async def close_store(store: RedisCacheStore) -> None:
    """Release the engine's connections.  The store is unusable afterwards."""
    await store.get_client().aclose()
