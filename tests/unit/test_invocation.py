"""Unit tests for the dual (awaitable / completion-callback) invocation convention."""

from __future__ import annotations

from typing import Any

import pytest

from cachestore.utils.invocation import deliver, pop_callback, supports_callback


class _Operations:
    """Minimal host for decorated operations."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    @supports_callback
    async def echo(self, value: Any, options: Any = None) -> Any:
        self.calls.append((value, options))
        return value

    @supports_callback
    async def fail(self) -> None:
        raise RuntimeError("boom")


class _Recorder:
    """Sync completion callback that records every invocation."""

    def __init__(self) -> None:
        self.calls: list[tuple[BaseException | None, Any]] = []

    def __call__(self, error: BaseException | None, result: Any) -> None:
        self.calls.append((error, result))


class TestPopCallback:
    def test_trailing_callable_is_popped(self) -> None:
        recorder = _Recorder()
        args, callback = pop_callback(("k", recorder))
        assert args == ("k",)
        assert callback is recorder

    def test_no_callable(self) -> None:
        args, callback = pop_callback(("k", {"ttl": 1}))
        assert args == ("k", {"ttl": 1})
        assert callback is None

    def test_explicit_callback_leaves_args_alone(self) -> None:
        recorder = _Recorder()
        other = _Recorder()
        args, callback = pop_callback(("k", other), recorder)
        assert args == ("k", other)
        assert callback is recorder


class TestDeferredConvention:
    @pytest.mark.asyncio
    async def test_returns_result(self) -> None:
        ops = _Operations()
        assert await ops.echo("value") == "value"

    @pytest.mark.asyncio
    async def test_raises_error(self) -> None:
        ops = _Operations()
        with pytest.raises(RuntimeError, match="boom"):
            await ops.fail()

    def test_wrapper_keeps_metadata(self) -> None:
        assert _Operations.echo.__name__ == "echo"


class TestCallbackConvention:
    @pytest.mark.asyncio
    async def test_trailing_callback_receives_result(self) -> None:
        ops = _Operations()
        recorder = _Recorder()

        returned = await ops.echo("value", recorder)

        assert returned is None
        assert recorder.calls == [(None, "value")]
        assert ops.calls == [("value", None)]

    @pytest.mark.asyncio
    async def test_callback_in_options_position(self) -> None:
        ops = _Operations()
        recorder = _Recorder()

        await ops.echo("value", recorder)

        # The callable never reaches the operation as its options argument.
        assert ops.calls[0][1] is None

    @pytest.mark.asyncio
    async def test_callback_after_options(self) -> None:
        ops = _Operations()
        recorder = _Recorder()

        await ops.echo("value", {"ttl": 1}, recorder)

        assert ops.calls == [("value", {"ttl": 1})]
        assert recorder.calls == [(None, "value")]

    @pytest.mark.asyncio
    async def test_keyword_callback(self) -> None:
        ops = _Operations()
        recorder = _Recorder()

        await ops.echo("value", callback=recorder)

        assert recorder.calls == [(None, "value")]

    @pytest.mark.asyncio
    async def test_error_is_delivered_once(self) -> None:
        ops = _Operations()
        recorder = _Recorder()

        returned = await ops.fail(recorder)

        assert returned is None
        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert isinstance(error, RuntimeError)
        assert result is None

    @pytest.mark.asyncio
    async def test_wrong_arity_error_goes_to_callback(self) -> None:
        ops = _Operations()
        recorder = _Recorder()

        returned = await ops.echo(recorder)

        assert returned is None
        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert isinstance(error, TypeError)
        assert result is None
        assert ops.calls == []

    @pytest.mark.asyncio
    async def test_wrong_arity_without_callback_raises(self) -> None:
        with pytest.raises(TypeError):
            await _Operations().echo()

    @pytest.mark.asyncio
    async def test_async_callback_is_awaited(self) -> None:
        ops = _Operations()
        received: list[Any] = []

        async def on_done(error: BaseException | None, result: Any) -> None:
            received.append((error, result))

        await ops.echo(7, on_done)

        assert received == [(None, 7)]

    @pytest.mark.asyncio
    async def test_callback_exception_propagates_without_redelivery(self) -> None:
        ops = _Operations()
        calls: list[Any] = []

        def on_done(error: BaseException | None, result: Any) -> None:
            calls.append((error, result))
            raise ValueError("callback failed")

        with pytest.raises(ValueError, match="callback failed"):
            await ops.echo("value", on_done)

        assert calls == [(None, "value")]


class TestDeliver:
    @pytest.mark.asyncio
    async def test_deliver_success(self) -> None:
        recorder = _Recorder()

        async def _work() -> int:
            return 3

        await deliver(_work, recorder)
        assert recorder.calls == [(None, 3)]

    @pytest.mark.asyncio
    async def test_deliver_routes_start_failure_to_callback(self) -> None:
        recorder = _Recorder()

        def _start() -> Any:
            raise TypeError("missing argument")

        await deliver(_start, recorder)

        assert len(recorder.calls) == 1
        assert isinstance(recorder.calls[0][0], TypeError)
