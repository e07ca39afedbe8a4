"""Text encoding helpers."""

from __future__ import annotations


def hex_encode(data: str) -> str:
    """Return the space separated hex code of every character of ``data``.

    Example: ``"Hello"`` -> ``"48 65 6c 6c 6f"``.
    """
    return " ".join(f"{ord(ch):02x}" for ch in data)


__all__ = ["hex_encode"]
