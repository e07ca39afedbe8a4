"""Utility helpers: numeric/bitfield conversions, formatting, async waits."""

from .asynchronous import await_event, sleep, sleep_ct
from .bits import (
    signed13_from_unsigned13,
    signed16_from_unsigned16,
    unsigned13_from_signed13,
    unsigned16_from_signed16,
)
from .encoding import hex_encode
from .errors import format_validation_error, get_error_message
from .numbers import limit, round_to

__all__ = [
    "await_event",
    "format_validation_error",
    "get_error_message",
    "hex_encode",
    "limit",
    "round_to",
    "signed13_from_unsigned13",
    "signed16_from_unsigned16",
    "sleep",
    "sleep_ct",
    "unsigned13_from_signed13",
    "unsigned16_from_signed16",
]
