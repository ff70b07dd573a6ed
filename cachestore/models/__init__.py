"""Data models for cachestore.

- **cache** -- :class:`CacheOptions` (per-call ``ttl`` / ``parse``) and
  :class:`StoreConfig` (default TTL and cacheability predicate).
"""

from cachestore.models.cache import CacheOptions, StoreConfig

__all__ = ["CacheOptions", "StoreConfig"]
