"""Custom exception hierarchy for cachestore.

All adapter exceptions inherit from :class:`CacheStoreError`, which carries
an optional ``provider_name`` so error handlers can tell which engine
("redis", "redis-mock") the failing store was built on.

    CacheStoreError      (base -- catch-all for adapter-raised errors)
    +-- CacheableError     (value rejected before reaching the engine)
    +-- ParseError         (stored value is not valid JSON)
    +-- ConfigurationError (invalid store / engine configuration)
    +-- InvalidOptionsError (per-call options fail validation)

Failures reported by the key-value engine itself are *not* wrapped: they
surface as the engine's own exception type, exported here as
:data:`EngineError` so callers can catch every engine failure in one place.
"""

from __future__ import annotations

from typing import Any

from redis.exceptions import RedisError

# Engine failures (connection refused, wrong type, bad arguments) pass
# through the adapter unchanged.
EngineError = RedisError


class CacheStoreError(Exception):
    """Base exception for all cachestore errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[redis-mock] "None" is not a cacheable value``.
    """

    def __init__(
        self,
        message: str = "An unexpected cache store error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Value errors
# ---------------------------------------------------------------------------

class CacheableError(CacheStoreError):
    """Raised when a value fails the cacheability predicate or cannot be encoded.

    Always raised before any engine command is issued, so a rejected write
    never creates or modifies a key.
    """

    def __init__(
        self,
        value: Any = None,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self._value = value
        super().__init__(
            message=message or f'"{value!r}" is not a cacheable value',
            provider_name=provider_name,
        )

    @property
    def value(self) -> Any:
        return self._value


class ParseError(CacheStoreError, ValueError):
    """Raised when a stored value cannot be decoded as JSON.

    The underlying :class:`json.JSONDecodeError` is available as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Stored value is not valid JSON",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(CacheStoreError):
    """Raised when store or engine configuration is invalid at build time."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidOptionsError(CacheStoreError):
    """Raised when per-call options fail validation, e.g. ``{"ttl": "soon"}``.

    Raised before any engine command is issued.
    """

    def __init__(
        self,
        message: str = "Invalid cache options",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
