"""Log level model.

Six ordered levels aligned with the stdlib ``logging`` numbers so records can
flow through ordinary handlers. ``TRACE`` is registered with
``logging.addLevelName``; ``FATAL`` reuses the ``CRITICAL`` number.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, Union


class LogLevelError(ValueError):
    """Raised for level values that do not name a :class:`LogLevel`."""


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL


logging.addLevelName(LogLevel.TRACE, "TRACE")

LevelLike = Union[LogLevel, int, str]

# ANSI color per level (console output only)
LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "\x1b[35m",  # magenta
    LogLevel.DEBUG: "\x1b[36m",  # cyan
    LogLevel.INFO: "\x1b[32m",  # green
    LogLevel.WARN: "\x1b[33m",  # yellow
    LogLevel.ERROR: "\x1b[31m",  # red
    LogLevel.FATAL: "\x1b[4m\x1b[31m",  # red underline
}
RESET = "\x1b[0m"


def log_level_from_string(value: str) -> LogLevel:
    """Parse a level name case-insensitively, ignoring surrounding whitespace.

    Raises:
        LogLevelError: If ``value`` is not one of the six level names.
    """
    try:
        return LogLevel[value.strip().upper()]
    except KeyError:
        raise LogLevelError(f"Unknown log level: {value}") from None


def coerce_level(level: LevelLike) -> LogLevel:
    """Normalize a ``LogLevel``, its numeric value or its name."""
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        return log_level_from_string(level)
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return LogLevel(level)
        except ValueError:
            raise LogLevelError(f"Unknown log level: {level}") from None
    raise LogLevelError(f"Unknown log level: {level!r}")


def level_label(levelno: int, fallback: str = "") -> str:
    """Fixed-width (5 chars) label used in log lines."""
    try:
        name = LogLevel(levelno).name
    except ValueError:
        name = fallback or logging.getLevelName(levelno)
    return f"{name[:5]:<5}"


__all__ = [
    "LEVEL_COLORS",
    "RESET",
    "LevelLike",
    "LogLevel",
    "LogLevelError",
    "coerce_level",
    "level_label",
    "log_level_from_string",
]
