"""JSON value codec and default cacheability policy.

Every value written to the engine is stored as its JSON text, and every
value read back is parsed from it.  :data:`UNDEFINED` stands in for "no
value at all" (e.g. the missing value of an odd-length ``mset`` argument
list); it is distinct from ``None``, which encodes to ``null``.
"""

from __future__ import annotations

import json
from typing import Any, Final

from cachestore.utils.errors import CacheableError, ParseError


class _Undefined:
    """Singleton marker for an absent value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

# What gets stored when there is nothing to serialize.  This is the JSON
# string "undefined", so it decodes back to the Python str ``"undefined"``.
UNDEFINED_PAYLOAD: Final = '"undefined"'


def encode_value(value: Any) -> str:
    """Serialize *value* to the JSON text stored in the engine.

    Raises
    ------
    CacheableError
        If the JSON encoder cannot represent *value* (sets, functions,
        NaN / infinity, arbitrary objects).
    """
    if value is UNDEFINED:
        return UNDEFINED_PAYLOAD
    try:
        return json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise CacheableError(
            value=value,
            message=f'"{value!r}" is not a cacheable value: {exc}',
        ) from exc


def decode_value(raw: str | bytes) -> Any:
    """Parse JSON text read back from the engine.

    Raises
    ------
    ParseError
        If *raw* is not valid JSON, including the non-standard
        ``NaN`` / ``Infinity`` literals that :func:`encode_value` refuses.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Stored value is not valid JSON: {exc.msg}") from exc
    except ValueError as exc:
        raise ParseError(f"Stored value is not valid JSON: {exc}") from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed")


def default_is_cacheable_value(value: Any) -> bool:
    """Accept everything except ``None`` and :data:`UNDEFINED`."""
    return value is not None and value is not UNDEFINED
