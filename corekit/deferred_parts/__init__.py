"""Deferred parts package.

Prefer importing from ``corekit.deferred`` for the stable surface.
"""

from .deferred import Deferred
from .errors import DeferredRejectedError, DeferredTimeoutError
from .settlement_state import SettlementState

__all__ = ["Deferred", "DeferredRejectedError", "DeferredTimeoutError", "SettlementState"]
