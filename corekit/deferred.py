"""Cancellable, timeout-aware deferred results (public API facade).

A :class:`Deferred` couples an :class:`asyncio.Future` with three early
termination sources: explicit ``resolve``/``reject``, an optional timeout and
an optional :class:`~corekit.cancellation.CancellationToken`. Whichever fires
first settles the future; the others are disarmed.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .deferred_parts.deferred import Deferred
from .deferred_parts.errors import DeferredRejectedError, DeferredTimeoutError
from .deferred_parts.settlement_state import SettlementState

__all__ = [
    "CancelledError",
    "Deferred",
    "DeferredRejectedError",
    "DeferredTimeoutError",
    "SettlementState",
]
