"""Numeric helpers: clamping and decimal rounding."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, localcontext
from typing import TypeVar

N = TypeVar("N", int, float)


def limit(minimum: N, value: N, maximum: N) -> N:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    return min(max(value, minimum), maximum)


def round_to(value: float, decimals: int) -> float:
    """Round ``value`` to ``decimals`` places using its decimal representation.

    Working on ``repr(value)`` avoids binary artifacts (``1.005 -> 1.01``).
    Halves go toward positive infinity (``-2.5 -> -2``). Negative ``decimals``
    round to tens, hundreds, ... Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    if exact.as_tuple().exponent >= -decimals:
        # no digits beyond the requested place
        return float(value)
    exp = Decimal(1).scaleb(-decimals)
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    with localcontext() as ctx:
        ctx.prec = 64
        return float(exact.quantize(exp, rounding=rounding))


__all__ = ["limit", "round_to"]
