"""Utility modules for cachestore.

- **codec** -- JSON encode/decode of stored values and the default
  cacheability predicate (rejects ``None`` and ``UNDEFINED``).
- **options** -- trailing-options detection and TTL / parse resolution.
- **invocation** -- the ``supports_callback`` decorator giving every store
  operation an optional completion-callback calling convention.
- **errors** -- exception hierarchy rooted at CacheStoreError.
- **logging** -- structlog setup (console in development, JSON in production).
"""

from cachestore.utils.codec import (
    UNDEFINED,
    decode_value,
    default_is_cacheable_value,
    encode_value,
)
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
    "CacheStoreError",
    "CacheableError",
    "ConfigurationError",
    "EngineError",
    "InvalidOptionsError",
    "ParseError",
    "decode_value",
    "default_is_cacheable_value",
    "encode_value",
]
