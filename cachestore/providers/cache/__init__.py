"""Cache store providers.

RedisCacheStore adapts any ``redis.asyncio``-compatible client to the
ICacheStore contract: a real Redis server for shared deployments, or the
in-memory ``fakeredis`` engine for tests and single-process use.  The
engine is chosen in ``cachestore.main``; callers never see the difference.
"""

from cachestore.providers.cache.redis_store import RedisCacheStore, coerce_config

__all__ = ["RedisCacheStore", "coerce_config"]
