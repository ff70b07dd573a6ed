"""Cache store over a Redis-compatible engine.

Works with any ``redis.asyncio.Redis``-compatible client: a real Redis
server or the in-memory ``fakeredis`` engine.  Clients must be created with
``decode_responses=True`` so stored payloads come back as ``str``.

Values are stored as JSON text (see :mod:`cachestore.utils.codec`).  A
``mset`` with a TTL is queued on a MULTI/EXEC pipeline so all pairs land
together; without a TTL a single ``MSET`` already is atomic.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import structlog
from pydantic import ValidationError

from cachestore.interfaces.cache_store import ICacheStore, OptionsArg
from cachestore.models.cache import CacheOptions, StoreConfig
from cachestore.utils.codec import (
    UNDEFINED,
    decode_value,
    default_is_cacheable_value,
    encode_value,
)
from cachestore.utils.errors import CacheableError, ConfigurationError
from cachestore.utils.invocation import supports_callback
from cachestore.utils.logging import get_logger
from cachestore.utils.options import (
    coerce_options,
    flatten_keys,
    resolve_parse,
    resolve_ttl,
    split_options,
)


def coerce_config(config: StoreConfig | Mapping[str, Any] | None) -> StoreConfig:
    """Build a :class:`StoreConfig` from a model, a mapping, or nothing."""
    if config is None:
        return StoreConfig()
    if isinstance(config, StoreConfig):
        return config
    try:
        return StoreConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid cache store config: {exc}") from exc


class RedisCacheStore(ICacheStore):
    """Cache store adapter for a Redis-compatible async client.

    Parameters
    ----------
    client:
        A ``redis.asyncio.Redis`` (or ``fakeredis.FakeAsyncRedis``) created
        with ``decode_responses=True``.
    config:
        Default TTL and optional cacheability predicate.  A mapping is
        accepted and validated into :class:`StoreConfig`.
    name:
        Label used in logs and error messages.
    """

    def __init__(
        self,
        client: Any,
        config: StoreConfig | Mapping[str, Any] | None = None,
        name: str = "redis",
    ) -> None:
        self.name = name
        self._client = client
        self._config = coerce_config(config)
        self._is_cacheable_value: Callable[[Any], bool] = (
            self._config.is_cacheable_value or default_is_cacheable_value
        )
        self._logger: structlog.BoundLogger = get_logger(__name__, store=name)

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def is_cacheable_value(self) -> Callable[[Any], bool]:
        return self._is_cacheable_value

    def get_client(self) -> Any:
        return self._client

    # ------------------------------------------------------------------
    # Single-key operations
    # ------------------------------------------------------------------

    @supports_callback
    async def set(self, key: str, value: Any, options: OptionsArg = None) -> Any:
        """Encode and write *value*; a truthy TTL uses ``SETEX``, otherwise ``SET``.

        A TTL of ``0`` (per call or configured) means no expiry.
        """
        opts = coerce_options(options)
        payload = self._encode(value)
        ttl = resolve_ttl(opts, self._config)

        if ttl:
            result = await self._client.setex(key, ttl, payload)
        else:
            result = await self._client.set(key, payload)

        self._logger.debug("cache_set", key=key, ttl=ttl or None)
        return result

    @supports_callback
    async def get(self, key: str, options: OptionsArg = None) -> Any:
        opts = coerce_options(options)
        raw = await self._client.get(key)
        if raw is None:
            self._logger.debug("cache_miss", key=key)
            return None

        self._logger.debug("cache_hit", key=key)
        return self._decode(raw, resolve_parse(opts))

    @supports_callback
    async def ttl(self, key: str) -> int:
        return await self._client.ttl(key)

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    @supports_callback
    async def mset(self, *args: Any, options: OptionsArg = None) -> Any:
        """Write alternating ``key, value`` pairs as one batch.

        Accepts ``mset("a", 1, "b", 2)`` or ``mset(["a", 1, "b", 2])``,
        optionally followed by an options mapping.  Every value is checked
        and encoded before anything is sent, so one rejected value means no
        pair is written.
        """
        flat, opts = self._split_pairs(args, options)

        items: list[tuple[Any, str]] = []
        for index in range(0, len(flat), 2):
            key = flat[index]
            value = flat[index + 1] if index + 1 < len(flat) else UNDEFINED
            items.append((key, self._encode(value)))

        ttl = resolve_ttl(opts, self._config)
        if ttl:
            async with self._client.pipeline(transaction=True) as pipe:
                for key, payload in items:
                    pipe.setex(key, ttl, payload)
                result = await pipe.execute()
        else:
            result = await self._client.mset(dict(items))

        self._logger.debug("cache_mset", count=len(items), ttl=ttl or None)
        return result

    @supports_callback
    async def mget(self, *keys: Any, options: OptionsArg = None) -> list[Any]:
        args, opts = self._split_keys(keys, options)
        names = flatten_keys(args)
        parse = resolve_parse(opts)

        raws = await self._client.mget(names)
        return [None if raw is None else self._decode(raw, parse) for raw in raws]

    @supports_callback
    async def delete(self, *keys: Any, options: OptionsArg = None) -> int:
        args, _ = self._split_keys(keys, options)
        return await self._remove(flatten_keys(args))

    @supports_callback
    async def mdel(self, *keys: Any, options: OptionsArg = None) -> int:
        args, _ = self._split_keys(keys, options)
        return await self._remove(flatten_keys(args))

    # ------------------------------------------------------------------
    # Whole-store operations
    # ------------------------------------------------------------------

    @supports_callback
    async def keys(self, pattern: str = "*") -> list[str]:
        return await self._client.keys(pattern)

    @supports_callback
    async def reset(self) -> Any:
        """Flush the engine's current database.  Irreversible."""
        result = await self._client.flushdb()
        self._logger.debug("cache_reset")
        return result

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _encode(self, value: Any) -> str:
        if not self._is_cacheable_value(value):
            self._logger.debug("cache_rejected", value_type=type(value).__name__)
            raise CacheableError(value=value, provider_name=self.name)
        return encode_value(value)

    @staticmethod
    def _decode(raw: str, parse: bool) -> Any:
        return decode_value(raw) if parse else raw

    async def _remove(self, names: list[Any]) -> int:
        removed = await self._client.delete(*names)
        self._logger.debug("cache_delete", requested=len(names), removed=removed)
        return removed

    @staticmethod
    def _split_keys(args: Sequence[Any], options: OptionsArg) -> tuple[list[Any], CacheOptions]:
        # An explicit ``options=`` keyword turns off trailing-object detection.
        if options is not None:
            return list(args), coerce_options(options)
        return split_options(args)

    @staticmethod
    def _split_pairs(args: Sequence[Any], options: OptionsArg) -> tuple[list[Any], CacheOptions]:
        # Pairs always come in even counts, so a trailing mapping is only
        # options when the count is odd (or the pairs arrive as one list).
        if options is not None:
            flat, opts = list(args), coerce_options(options)
        elif (args and isinstance(args[0], (list, tuple))) or len(args) % 2 == 1:
            flat, opts = split_options(args)
        else:
            flat, opts = list(args), coerce_options(None)

        if len(flat) == 1 and isinstance(flat[0], (list, tuple)):
            flat = list(flat[0])
        return flat, opts
