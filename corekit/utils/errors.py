"""Error message normalization.

``get_error_message`` turns the heterogeneous values that end up in
``except`` blocks and rejected futures into one human-readable string.
Pydantic ``ValidationError`` instances are rendered as a compact, single-line
summary instead of pydantic's multi-line report.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from pydantic import ValidationError

VALIDATION_PREFIX = "Validation error"


def _format_loc(loc: Iterable[Union[int, str]]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def format_validation_error(error: ValidationError) -> str:
    """Render ``error`` as ``Validation error: <msg> at "<path>"; ...``."""
    issues = []
    for item in error.errors():
        path = _format_loc(item.get("loc", ()))
        msg = item.get("msg", "invalid value")
        issues.append(f'{msg} at "{path}"' if path else msg)
    if not issues:
        return VALIDATION_PREFIX
    return f"{VALIDATION_PREFIX}: {'; '.join(issues)}"


def get_error_message(error: Any) -> str:
    """Return a human-readable message for ``error``.

    - ``str``: returned unchanged.
    - pydantic ``ValidationError``: compact summary of all issues.
    - anything (exception or not) with a string ``message`` attribute: that
      attribute.
    - other exceptions: ``str(error)``, or the class name when that is empty.
    - any other value: ``str(error)``.
    """
    if isinstance(error, str):
        return error
    if isinstance(error, ValidationError):
        return format_validation_error(error)
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


__all__ = ["VALIDATION_PREFIX", "format_validation_error", "get_error_message"]
