import asyncio

import pytest

from unifs.core.cancellation import CancellationToken
from unifs.core.errors import ErrorKind, OperationCancelledError


async def _value(v):
    return v


@pytest.mark.asyncio
async def test_run_returns_result():
    token = CancellationToken()
    assert await token.run(_value, 42) == 42


@pytest.mark.asyncio
async def test_cancelled_token_refuses_to_start():
    token = CancellationToken()
    token.cancel()
    called = []

    async def work():
        called.append(True)

    with pytest.raises(OperationCancelledError) as exc_info:
        await token.run(work)
    assert exc_info.value.kind is ErrorKind.CANCELLED
    assert called == []


@pytest.mark.asyncio
async def test_cancel_interrupts_in_flight_call():
    token = CancellationToken()
    started = asyncio.Event()

    async def slow():
        started.set()
        await asyncio.sleep(10)

    async def cancel_soon():
        await started.wait()
        token.cancel()

    with pytest.raises(OperationCancelledError, match="cancelled"):
        await asyncio.gather(token.run(slow), cancel_soon())


@pytest.mark.asyncio
async def test_deadline_interrupts_slow_call():
    token = CancellationToken(timeout=0.05)
    with pytest.raises(OperationCancelledError, match="deadline"):
        await token.run(asyncio.sleep, 5)
    assert token.cancelled


@pytest.mark.asyncio
async def test_errors_from_call_propagate():
    async def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await CancellationToken().run(boom)


def test_remaining_without_deadline():
    assert CancellationToken().remaining() is None


def test_remaining_counts_down():
    token = CancellationToken(timeout=60)
    remaining = token.remaining()
    assert 0 < remaining <= 60
    assert not token.cancelled


def test_expired_token_raises():
    token = CancellationToken(timeout=0)
    with pytest.raises(OperationCancelledError):
        token.raise_if_cancelled()
