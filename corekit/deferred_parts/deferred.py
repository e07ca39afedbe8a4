"""Deferred result with exactly-once settlement.

The :class:`Deferred` owns an :class:`asyncio.Future` together with the
resolve/reject capabilities for it. Settlement can be triggered by an explicit
call, by an optional timer and by an optional cancellation token; all sources
route through the same guarded settlement path, so only the first one has an
effect and the others are disarmed (timer cancelled, token listener removed).

Failure modes
-------------
- Timeout: the future fails with :class:`DeferredTimeoutError`.
- Cancellation: the future fails with :class:`~corekit.cancellation.CancelledError`.
- ``reject`` with a non-exception reason: :class:`DeferredRejectedError`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Generator, Generic, Optional, Protocol, TypeVar

from ..cancellation_parts.cancellation_token import CancellationToken
from ..cancellation_parts.cancelled_error import CancelledError
from .errors import DeferredRejectedError, DeferredTimeoutError
from .settlement_state import SettlementState

T = TypeVar("T")

logger = logging.getLogger("corekit.deferred")


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


CallLater = Callable[[float, Callable[[], None]], TimerHandle]
ResolveFn = Callable[[Any], bool]
RejectFn = Callable[..., bool]


def _as_exception(reason: Any) -> BaseException:
    if isinstance(reason, BaseException):
        return reason
    if isinstance(reason, type) and issubclass(reason, BaseException):
        return reason()
    return DeferredRejectedError(reason)


class Deferred(Generic[T]):
    """A future settled from the outside, with optional timeout and cancellation.

    Parameters
    ----------
    timeout:
        Seconds after which a still pending deferred fails with
        :class:`DeferredTimeoutError`. ``None`` or values ``<= 0`` disable it.
    cancellation_token:
        Token whose cancellation fails a still pending deferred with
        :class:`CancelledError`. An already cancelled token fails it
        immediately.
    executor:
        Called once during construction with ``(resolve, reject)`` to bridge
        callback-style APIs. An exception raised by the executor rejects the
        deferred.
    loop:
        Event loop owning the future; defaults to the running loop.
    call_later:
        Timer scheduler ``(delay, callback) -> handle``; defaults to
        ``loop.call_later``. Tests substitute a stub clock here.

    The deferred is awaitable directly; ``get_promise()`` returns a consumer
    view of the result. Cancelling a view (for example through
    ``asyncio.wait_for``) only affects that consumer; other awaiters and the
    producer are unaffected. The owner can cancel the underlying ``future``
    explicitly, which settles the deferred as rejected.
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        cancellation_token: Optional[CancellationToken] = None,
        executor: Optional[Callable[[ResolveFn, RejectFn], Any]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        call_later: Optional[CallLater] = None,
    ) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._future: asyncio.Future[T] = self._loop.create_future()
        self._future.add_done_callback(self._on_future_done)
        self._state = SettlementState.PENDING
        self._timer: Optional[TimerHandle] = None
        self._token: Optional[CancellationToken] = None

        if executor is not None:
            try:
                executor(self.resolve, self.reject)
            except Exception as exc:  # noqa: BLE001
                self.reject(exc)

        if self.settled:
            return

        if timeout is not None and timeout > 0:
            schedule = call_later or self._loop.call_later
            self._timer = schedule(timeout, self._on_timeout)

        if cancellation_token is not None:
            if cancellation_token.cancelled:
                self._cancel_from(cancellation_token)
            else:
                self._token = cancellation_token
                cancellation_token.on_cancel(self._on_cancel)

    @property
    def state(self) -> SettlementState:
        return self._state

    @property
    def settled(self) -> bool:
        return self._state is not SettlementState.PENDING

    @property
    def future(self) -> "asyncio.Future[T]":
        """Underlying future (owner handle; cancelling it rejects the deferred)."""
        return self._future

    def get_promise(self) -> "asyncio.Future[T]":
        """Return an awaitable view of the result that consumers may cancel."""
        return asyncio.shield(self._future)

    def resolve(self, value: T = None) -> bool:  # type: ignore[assignment]
        """Settle successfully with ``value``.

        Returns ``True`` if this call settled the deferred and ``False`` if it
        was already settled (the call is then a no-op).
        """
        if not self._claim():
            return False
        self._state = SettlementState.RESOLVED
        self._future.set_result(value)
        self._cleanup()
        return True

    def reject(self, reason: Any = None) -> bool:
        """Settle with a failure.

        Exceptions (instances or classes) are used as is; any other reason is
        wrapped in :class:`DeferredRejectedError`. Returns ``True`` if this
        call settled the deferred.
        """
        if not self._claim():
            return False
        self._state = SettlementState.REJECTED
        self._future.set_exception(_as_exception(reason))
        self._cleanup()
        return True

    def __await__(self) -> Generator[Any, None, T]:
        return self.get_promise().__await__()

    def _claim(self) -> bool:
        """Return True if the caller may settle the deferred now."""
        if self.settled:
            return False
        if self._future.done():
            # Owner cancelled the future; the done callback has not run yet.
            self._state = SettlementState.REJECTED
            self._cleanup()
            return False
        return True

    def _on_timeout(self) -> None:
        self._timer = None
        if self.reject(DeferredTimeoutError()):
            logger.debug("deferred timed out")

    def _on_cancel(self) -> None:
        token = self._token
        self._token = None
        if token is not None:
            self._cancel_from(token)

    def _cancel_from(self, token: CancellationToken) -> None:
        if self.reject(CancelledError(token.reason or "Cancelled")):
            logger.debug("deferred cancelled by token (reason=%r)", token.reason)

    def _on_future_done(self, fut: "asyncio.Future[T]") -> None:
        if fut.cancelled():
            # Owner cancelled the underlying future.
            if not self.settled:
                self._state = SettlementState.REJECTED
                self._cleanup()
            return
        # Mark the exception as retrieved; awaiters still receive it.
        fut.exception()

    def _cleanup(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        token, self._token = self._token, None
        if token is not None:
            token.off_cancel(self._on_cancel)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Deferred(state={self._state.value})"


__all__ = ["Deferred"]
