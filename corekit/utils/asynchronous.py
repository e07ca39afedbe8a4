"""Asyncio helpers: plain and cancellable sleeps, awaiting emitter events."""

from __future__ import annotations

import asyncio
from typing import Any

from ..cancellation_parts.cancellation_token import CancellationToken
from ..cancellation_parts.cancelled_error import CancelledError
from ..events import EventEmitter


async def sleep(seconds: float) -> None:
    """Suspend the current task for ``seconds``."""
    await asyncio.sleep(seconds)


async def sleep_ct(seconds: float, token: CancellationToken) -> None:
    """Sleep for ``seconds`` unless ``token`` is cancelled first.

    Raises:
        CancelledError: If the token is cancelled before the sleep elapsed,
            including when it is already cancelled on entry.

    The timer and the token listener are released on every exit path.
    """
    token.raise_if_cancelled()
    loop = asyncio.get_running_loop()
    waiter: asyncio.Future[None] = loop.create_future()

    def _elapsed() -> None:
        if not waiter.done():
            waiter.set_result(None)

    def _cancelled() -> None:
        if not waiter.done():
            waiter.set_exception(CancelledError(token.reason or "Cancelled"))

    timer = loop.call_later(seconds, _elapsed)
    token.on_cancel(_cancelled)
    try:
        await waiter
    finally:
        timer.cancel()
        token.off_cancel(_cancelled)


def await_event(emitter: EventEmitter, event: str) -> "asyncio.Future[Any]":
    """Return a future resolved by the next ``event`` emission.

    The result is the single emitted argument, ``None`` for none, or a tuple
    when several arguments were emitted. Cancelling the future unsubscribes.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[Any] = loop.create_future()

    def _listener(*args: Any) -> None:
        if fut.done():
            return
        if not args:
            fut.set_result(None)
        elif len(args) == 1:
            fut.set_result(args[0])
        else:
            fut.set_result(args)

    def _on_done(f: "asyncio.Future[Any]") -> None:
        if f.cancelled():
            emitter.off(event, _listener)

    emitter.once(event, _listener)
    fut.add_done_callback(_on_done)
    return fut


__all__ = ["await_event", "sleep", "sleep_ct"]
