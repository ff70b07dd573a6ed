"""Public interface definitions for cache stores.

Application code depends on :class:`ICacheStore` only.  Concrete stores
live in ``cachestore/providers/`` and are assembled in ``cachestore/main.py``.

CONCRETE PROVIDER MAP:
    Interface      →  Concrete implementations (in cachestore/providers/)
    ─────────────────────────────────────────────────────────────────
    ICacheStore    →  RedisCacheStore (redis.asyncio or fakeredis engine)
"""

from cachestore.interfaces.cache_store import ICacheStore, OptionsArg

__all__ = ["ICacheStore", "OptionsArg"]
