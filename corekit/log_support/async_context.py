"""Ambient log context bound to the logical call chain.

The label lives in a :class:`contextvars.ContextVar`, so it follows asyncio
tasks across suspension points (and is copied into tasks spawned while it is
bound) instead of being attached to the OS thread.
"""

from __future__ import annotations

import inspect
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Awaitable, Callable, Iterator, Optional, TypeVar

T = TypeVar("T")

_ASYNC_CONTEXT: ContextVar[Optional[str]] = ContextVar("corekit_async_context", default=None)


def get_async_context() -> Optional[str]:
    """Return the label bound to the current call chain, if any."""
    return _ASYNC_CONTEXT.get()


@contextmanager
def async_context(label: str) -> Iterator[str]:
    """Bind ``label`` for the extent of the ``with`` block.

    Nested blocks shadow the outer label and restore it on exit.
    """
    token = _ASYNC_CONTEXT.set(label)
    try:
        yield label
    finally:
        _ASYNC_CONTEXT.reset(token)


async def _bind_awaitable(label: str, awaitable: Awaitable[T]) -> T:
    with async_context(label):
        return await awaitable


def run_in_async_context(label: str, callback: Callable[[], Any]) -> Any:
    """Run ``callback()`` with ``label`` bound and return its result.

    If the callback returns an awaitable (e.g. it is an ``async def``), a
    coroutine is returned instead that keeps ``label`` bound while the
    awaitable runs, including after it suspends.
    """
    with async_context(label):
        result = callback()
    if inspect.isawaitable(result):
        return _bind_awaitable(label, result)
    return result


__all__ = ["async_context", "get_async_context", "run_in_async_context"]
