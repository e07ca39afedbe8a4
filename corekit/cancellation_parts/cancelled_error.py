"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of deferred results and cancellable sleeps. Kept isolated to satisfy the
one-class-per-file policy.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled through a cancellation token.

    Distinct from :class:`asyncio.CancelledError`: this error is a regular
    failure outcome of the awaited operation, not a request to unwind the
    awaiting task.
    """

    def __init__(self, message: str = "Cancelled") -> None:
        super().__init__(message)


__all__ = ["CancelledError"]
