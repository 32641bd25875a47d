"""Cancellation and deadline signal passed to every backend I/O call."""

from __future__ import annotations

import asyncio
import time
from typing import Any, Awaitable, Callable, TypeVar

from unifs.core.errors import OperationCancelledError

T = TypeVar("T")


class CancellationToken:
    """Cooperative cancellation with an optional deadline.

    Adapters route each backend call through ``run()``: the token is checked
    before the call starts, and the in-flight call is abandoned as soon as the
    token is cancelled or the deadline passes.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = False
        self._event: asyncio.Event | None = None

    def cancel(self) -> None:
        self._cancelled = True
        if self._event is not None:
            self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled or self._expired()

    def remaining(self) -> float | None:
        """Seconds until the deadline, ``None`` without one."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelledError("Operation was cancelled")
        if self._expired():
            raise OperationCancelledError("Operation deadline exceeded")

    async def run(self, func: Callable[..., Awaitable[T]], *args: Any) -> T:
        """Await ``func(*args)`` unless the token fires first."""
        self.raise_if_cancelled()
        if self._event is None:
            self._event = asyncio.Event()
        task = asyncio.ensure_future(func(*args))
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait(
                {task, waiter},
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        except BaseException:
            task.cancel()
            raise
        finally:
            waiter.cancel()
        if task in done:
            return task.result()
        task.cancel()
        self.raise_if_cancelled()
        # asyncio.wait can time out a hair before the monotonic deadline
        raise OperationCancelledError("Operation deadline exceeded")

    def _expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline
