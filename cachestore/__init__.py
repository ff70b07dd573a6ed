"""cachestore: a uniform async cache contract over Redis-compatible engines.

Usage::

    from cachestore import redis_mock_store

    store = await redis_mock_store({"ttl": 60})
    await store.set("x", {"a": 1})
    await store.get("x")            # {"a": 1}
    await store.mget("x", "y")      # [{"a": 1}, None]
"""

from cachestore.interfaces.cache_store import ICacheStore
from cachestore.main import build_store, redis_mock_store
from cachestore.models.cache import CacheOptions, StoreConfig
from cachestore.providers.cache.redis_store import RedisCacheStore
from cachestore.utils.codec import UNDEFINED
from cachestore.utils.errors import (
    CacheableError,
    CacheStoreError,
    ConfigurationError,
    EngineError,
    InvalidOptionsError,
    ParseError,
)

__all__ = [
    "UNDEFINED",
    "CacheOptions",
    "CacheStoreError",
    "CacheableError",
    "ConfigurationError",
    "EngineError",
    "InvalidOptionsError",
    "ICacheStore",
    "ParseError",
    "RedisCacheStore",
    "StoreConfig",
    "build_store",
    "redis_mock_store",
]
