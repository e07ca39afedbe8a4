"""Cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation constructs via the canonical ``corekit.cancellation``
import path while the concrete implementations live under
``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is a one-shot broadcast: cancelling it notifies every
  subscribed :class:`~corekit.deferred.Deferred` and ``sleep_ct`` exactly once.
- ``CancelledError`` is the failure those consumers settle with.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CANCEL_EVENT, CancellationToken

__all__ = ["CANCEL_EVENT", "CancellationToken", "CancelledError"]
