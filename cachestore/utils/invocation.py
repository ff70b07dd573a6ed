"""Dual invocation convention for cache operations.

Every store operation is an ``async def`` returning its result.  The
:func:`supports_callback` decorator layers Node-style completion callbacks
on top, so both of these work::

    value = await store.get("key")

    def on_done(error, value): ...
    await store.get("key", on_done)              # trailing positional callable
    await store.get("key", callback=on_done)     # or explicit keyword

In callback mode the callback is invoked exactly once with
``(error, None)`` or ``(None, result)`` and the awaited value is ``None``.
Both sync and async callbacks are accepted.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

import structlog

from cachestore.utils.logging import get_logger

_T = TypeVar("_T")

CompletionCallback = Callable[[BaseException | None, Any], Any]

_logger: structlog.BoundLogger = get_logger(__name__)


def pop_callback(
    args: Sequence[Any],
    callback: CompletionCallback | None = None,
) -> tuple[tuple[Any, ...], CompletionCallback | None]:
    """Pull a trailing callable out of *args* unless *callback* was given explicitly."""
    if callback is None and args and callable(args[-1]):
        return tuple(args[:-1]), args[-1]
    return tuple(args), callback


async def deliver(start: Callable[[], Awaitable[_T]], callback: CompletionCallback) -> None:
    """Run the operation produced by *start* and hand its outcome to *callback*.

    Exceptions raised while starting or awaiting the operation (including a
    bad-arity ``TypeError``) go to the callback.  Exceptions raised
    by the callback itself propagate to the caller and are not fed back.
    """
    try:
        result = await start()
    except Exception as exc:
        _logger.debug("cache_callback_error", error=str(exc), error_type=type(exc).__name__)
        outcome = callback(exc, None)
    else:
        outcome = callback(None, result)

    if inspect.isawaitable(outcome):
        await outcome


def supports_callback(
    operation: Callable[..., Awaitable[_T]],
) -> Callable[..., Awaitable[_T | None]]:
    """Decorate an async store method so it also accepts a completion callback."""

    @functools.wraps(operation)
    async def wrapper(self: Any, *args: Any, callback: CompletionCallback | None = None, **kwargs: Any) -> _T | None:
        args, callback = pop_callback(args, callback)
        if callback is None:
            return await operation(self, *args, **kwargs)
        await deliver(lambda: operation(self, *args, **kwargs), callback)
        return None

    return wrapper
