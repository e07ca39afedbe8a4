"""Cancellation parts package.

Prefer importing from ``corekit.cancellation`` for the stable surface.
"""

from .cancelled_error import CancelledError
from .cancellation_token import CANCEL_EVENT, CancellationToken

__all__ = ["CANCEL_EVENT", "CancellationToken", "CancelledError"]
