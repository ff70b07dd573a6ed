"""Abstract base class for cache stores.

Defines the key-value caching contract application code programs against.
Concrete stores adapt a raw key-value engine (Redis, an in-memory Redis
mock) to it, so the engine can be swapped without touching callers.

Every operation is async and, in concrete stores, also accepts a trailing
completion callback (see :mod:`cachestore.utils.invocation`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from cachestore.models.cache import CacheOptions

OptionsArg = Mapping[str, Any] | CacheOptions | None


class ICacheStore(ABC):
    """Contract for cache stores layered over a key-value engine."""

    name: str

    @property
    @abstractmethod
    def is_cacheable_value(self) -> Callable[[Any], bool]:
        """The predicate deciding whether a value may be written."""

    @abstractmethod
    def get_client(self) -> Any:
        """Return the underlying engine handle."""

    @abstractmethod
    async def get(self, key: str, options: OptionsArg = None) -> Any:
        """Retrieve the value stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.
        options:
            ``{"parse": False}`` returns the raw stored string.

        Returns
        -------
        Any or None
            The decoded value, or ``None`` when the key is absent.
        """

    @abstractmethod
    async def set(self, key: str, value: Any, options: OptionsArg = None) -> Any:
        """Store *value* under *key*.

        Parameters
        ----------
        key:
            The cache key.
        value:
            A JSON-serializable value accepted by :attr:`is_cacheable_value`.
        options:
            ``{"ttl": seconds}`` overrides the store's default TTL.

        Returns
        -------
        Any
            The engine's acknowledgement.
        """

    @abstractmethod
    async def delete(self, *keys: Any, options: OptionsArg = None) -> int:
        """Remove *keys* and return how many existed."""

    @abstractmethod
    async def mget(self, *keys: Any, options: OptionsArg = None) -> list[Any]:
        """Retrieve several keys, in order, ``None`` for each miss."""

    @abstractmethod
    async def mset(self, *args: Any, options: OptionsArg = None) -> Any:
        """Store alternating ``key, value`` pairs in one batch."""

    @abstractmethod
    async def mdel(self, *keys: Any, options: OptionsArg = None) -> int:
        """Remove several keys (nested key groups are flattened)."""

    @abstractmethod
    async def keys(self, pattern: str = "*") -> list[str]:
        """List keys matching a glob-style *pattern*."""

    @abstractmethod
    async def ttl(self, key: str) -> int:
        """Remaining time-to-live of *key* in seconds, or the engine's sentinel."""

    @abstractmethod
    async def reset(self) -> Any:
        """Remove every key from the underlying engine."""
