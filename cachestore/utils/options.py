"""Option resolution for cache operations.

Batch operations take variadic positional arguments and may end with an
options object::

    await store.mget("a", "b", {"parse": False})

:func:`split_options` peels that trailing object off; :func:`resolve_ttl`
and :func:`resolve_parse` turn the per-call options plus the store config
into the effective behaviour of one call.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from cachestore.models.cache import CacheOptions, StoreConfig
from cachestore.utils.errors import InvalidOptionsError

_EMPTY_OPTIONS = CacheOptions()


def is_options_object(candidate: Any) -> bool:
    """Return ``True`` for a structured options object (mapping or CacheOptions).

    Lists, tuples, strings and ``None`` never count as options.
    """
    return isinstance(candidate, (Mapping, CacheOptions))


def coerce_options(options: Mapping[str, Any] | CacheOptions | None) -> CacheOptions:
    """Normalize *options* into a :class:`CacheOptions` instance."""
    if options is None:
        return _EMPTY_OPTIONS
    if isinstance(options, CacheOptions):
        return options
    try:
        return CacheOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid cache options {dict(options)!r}: {exc}") from exc


def split_options(args: Sequence[Any]) -> tuple[list[Any], CacheOptions]:
    """Separate a trailing options object from positional arguments.

    Returns
    -------
    tuple[list[Any], CacheOptions]
        The remaining arguments (a new list; *args* is untouched) and the
        options for the call, empty when none were supplied.
    """
    remaining = list(args)
    if remaining and is_options_object(remaining[-1]):
        return remaining, coerce_options(remaining.pop())
    return remaining, _EMPTY_OPTIONS


def resolve_ttl(options: CacheOptions, config: StoreConfig) -> int | None:
    """Effective TTL for a write: per-call value when given, else the store default.

    Presence is tested with ``is not None`` so an explicit ``0`` wins over
    the configured default.
    """
    if options.ttl is not None:
        return options.ttl
    return config.ttl


def resolve_parse(options: CacheOptions) -> bool:
    """Whether reads should JSON-decode; only an explicit ``False`` disables it."""
    return options.parse is not False


def flatten_keys(args: Iterable[Any]) -> list[Any]:
    """Flatten one level of key groups: ``("a", ["b", "c"])`` -> ``["a", "b", "c"]``."""
    keys: list[Any] = []
    for item in args:
        if isinstance(item, (list, tuple)):
            keys.extend(item)
        else:
            keys.append(item)
    return keys
