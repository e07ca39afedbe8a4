"""Two's-complement conversions for 13- and 16-bit protocol fields.

Values are plain Python ints. The ``signedN_from_unsignedN`` functions read
the top bit of an N-bit field as the sign; ``unsignedN_from_signedN`` encode a
signed value back into the N-bit field.
"""

from __future__ import annotations

_MASK12 = 0x0FFF
_SIGN13 = 0x1000
_MASK15 = 0x7FFF
_SIGN16 = 0x8000


def signed13_from_unsigned13(val: int) -> int:
    """Interpret the low 13 bits of ``val`` as a signed number (-4096..4095)."""
    ret = val & _MASK12
    if val & _SIGN13:
        return ret - _SIGN13
    return ret


def unsigned13_from_signed13(val: int) -> int:
    """Encode a signed number (-4096..4095) as a 13-bit field."""
    if val >= 0:
        return val & _MASK12
    return (val & _MASK12) | _SIGN13


def signed16_from_unsigned16(val: int) -> int:
    """Interpret the low 16 bits of ``val`` as a signed number (-32768..32767)."""
    ret = val & _MASK15
    if val & _SIGN16:
        return ret - _SIGN16
    return ret


def unsigned16_from_signed16(val: int) -> int:
    """Encode a signed number (-32768..32767) as a 16-bit field."""
    if val >= 0:
        return val & _MASK15
    return (val & _MASK15) | _SIGN16


__all__ = [
    "signed13_from_unsigned13",
    "signed16_from_unsigned16",
    "unsigned13_from_signed13",
    "unsigned16_from_signed16",
]
