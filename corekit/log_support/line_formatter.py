"""Human-readable line formatter.

Line layout::

    2024-05-01T12:00:00.000Z [INFO ] <req-42> <db> message

The ``<async>`` tag is the ambient call-chain label, the second tag the
logger's configured context. Records produced by ``Log`` carry both as record
attributes (``async_context`` / ``log_context``); records from plain stdlib
loggers fall back to the current ambient label and the logger name.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Sequence

from .async_context import get_async_context
from .levels import LEVEL_COLORS, RESET, LogLevel, level_label

_MISSING = object()
_PLACEHOLDER = re.compile(r"%(?:%|[-#0 +]*\d*(?:\.\d+)?[diouxXeEfFgGcrsa])")


def iso_timestamp(created: float) -> str:
    """UTC ISO-8601 timestamp with millisecond precision and ``Z`` suffix."""
    stamp = datetime.fromtimestamp(created, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_message(message: str, args: Sequence[Any]) -> str:
    """Apply printf-style ``args`` to ``message``.

    Placeholders are filled left to right; placeholders without an argument
    stay in the text, and arguments without a placeholder are appended
    separated by spaces. An argument that does not fit its conversion (``%d``
    with a string) is inserted with ``str``.
    """
    if not args:
        return message
    pending = list(args)

    def substitute(match: "re.Match[str]") -> str:
        placeholder = match.group(0)
        if placeholder == "%%":
            return "%"
        if not pending:
            return placeholder
        arg = pending.pop(0)
        try:
            return placeholder % (arg,)
        except (TypeError, ValueError, OverflowError):
            return str(arg)

    text = _PLACEHOLDER.sub(substitute, message)
    return " ".join([text, *(str(arg) for arg in pending)])


class LineFormatter(logging.Formatter):
    """Formats records as plain single lines (exceptions appended)."""

    def format(self, record: logging.LogRecord) -> str:
        ambient = getattr(record, "async_context", _MISSING)
        if ambient is _MISSING:
            ambient = get_async_context()
        context = getattr(record, "log_context", _MISSING)
        if context is _MISSING:
            context = record.name

        parts = [iso_timestamp(record.created), f"[{level_label(record.levelno, record.levelname)}]"]
        if ambient:
            parts.append(f"<{ambient}>")
        if context:
            parts.append(f"<{context}>")
        parts.append(record.getMessage())
        line = " ".join(parts)

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"
        return line


class ColorLineFormatter(LineFormatter):
    """Console variant: wraps the line in the level color when requested.

    The record attribute ``use_color`` decides; records without it use the
    formatter's ``default_color``.
    """

    def __init__(self, default_color: bool = False) -> None:
        super().__init__()
        self.default_color = default_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not getattr(record, "use_color", self.default_color):
            return line
        try:
            color = LEVEL_COLORS[LogLevel(record.levelno)]
        except ValueError:
            return line
        return f"{color}{line}{RESET}"


__all__ = ["ColorLineFormatter", "LineFormatter", "format_message", "iso_timestamp"]
