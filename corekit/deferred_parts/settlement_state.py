"""Settlement state tag for :class:`~corekit.deferred.Deferred`."""

from __future__ import annotations

from enum import Enum


class SettlementState(str, Enum):
    """Explicit settlement tag; transitions only away from ``PENDING``."""

    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"


__all__ = ["SettlementState"]
