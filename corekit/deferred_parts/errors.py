"""Error types raised through a :class:`~corekit.deferred.Deferred`."""

from __future__ import annotations

from typing import Any


class DeferredTimeoutError(TimeoutError):
    """Raised when a deferred result is still pending after its timeout."""

    def __init__(self, message: str = "Timed out") -> None:
        super().__init__(message)


class DeferredRejectedError(RuntimeError):
    """Wraps a rejection reason that is not an exception.

    Attributes:
        reason: The original value passed to ``reject``.
    """

    def __init__(self, reason: Any = None) -> None:
        self.reason = reason
        super().__init__("Rejected" if reason is None else f"Rejected: {reason!r}")


__all__ = ["DeferredRejectedError", "DeferredTimeoutError"]
