"""Process-wide logger state behind one explicit handle.

``LogSettings`` holds everything shared by all ``Log`` instances: the minimum
level, the defaults applied to newly constructed loggers, the global line
callback and the shared global ``Log``. It is created lazily from the
environment on first use (:func:`get_log_settings`) and can be discarded with
:func:`reset_log_settings` so tests start from a clean state.

The minimum level is mirrored onto the stdlib ``corekit`` logger, which owns
the managed console handler (and, optionally, a rotating file handler).
Library-internal loggers (``corekit.deferred`` ...) are its children and share
those handlers.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from typing import Any, Callable, Optional

from ..config.env import parse_bool, read_env
from .levels import LevelLike, LogLevel, coerce_level, log_level_from_string
from .line_formatter import ColorLineFormatter, LineFormatter
from .log_config import LogConfig

BASE_LOGGER_NAME = "corekit"

_CONSOLE_HANDLER_ATTR = "_corekit_console_handler"
_FILE_HANDLER_ATTR = "_corekit_file_handler"

LogCallback = Callable[[str], Any]


class ConsoleHandler(logging.StreamHandler):
    """Stream handler that always writes to the *current* ``sys.stderr``.

    Resolving the stream at emit time keeps output working when ``sys.stderr``
    is swapped (test capture, daemonization).
    """

    def __init__(self) -> None:
        super().__init__()

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


@dataclass
class LogSettings:
    """Shared configuration for every ``Log`` instance (last writer wins)."""

    level: LogLevel = LogLevel.INFO
    defaults: LogConfig = field(default_factory=LogConfig)
    global_callback: Optional[LogCallback] = None
    global_log: Any = None
    formatter: LineFormatter = field(default_factory=LineFormatter)

    def set_level(self, level: LevelLike) -> LogLevel:
        self.level = coerce_level(level)
        base = logging.getLogger(BASE_LOGGER_NAME)
        base.setLevel(self.level)
        for handler in base.handlers:
            if getattr(handler, _CONSOLE_HANDLER_ATTR, False) or getattr(handler, _FILE_HANDLER_ATTR, False):
                handler.setLevel(self.level)
        return self.level

    def is_enabled_for(self, level: LevelLike) -> bool:
        return coerce_level(level) >= self.level

    def update_defaults(self, context: Optional[str] = None, color: Optional[bool] = None) -> LogConfig:
        """Update only the default fields that are given (not ``None``)."""
        if context is not None:
            self.defaults.context = context
        if color is not None:
            self.defaults.color = color
        return self.defaults


_SETTINGS: Optional[LogSettings] = None


def _settings_from_env() -> LogSettings:
    raw_level = read_env("level")
    level = log_level_from_string(raw_level) if raw_level is not None else LogLevel.INFO
    defaults = LogConfig(
        context=read_env("context"),
        color=parse_bool(read_env("color"), default=False),
    )
    return LogSettings(level=level, defaults=defaults)


def _ensure_base_logger(level: LogLevel) -> logging.Logger:
    """Install the managed console handler on the ``corekit`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    logger.setLevel(level)
    for existing in list(logger.handlers):
        if getattr(existing, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(existing)
    handler = ConsoleHandler()
    handler.setLevel(level)
    handler.setFormatter(ColorLineFormatter())
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_log_settings() -> LogSettings:
    """Return the process-wide settings, creating them on first use.

    Raises:
        LogLevelError: If ``COREKIT_LOG_LEVEL`` names an unknown level.
    """
    global _SETTINGS  # noqa: PLW0603 - documented process-wide singleton
    if _SETTINGS is None:
        settings = _settings_from_env()
        _ensure_base_logger(settings.level)
        _SETTINGS = settings
    return _SETTINGS


def reset_log_settings() -> None:
    """Drop the process-wide settings and managed handlers.

    The next :func:`get_log_settings` call re-reads the environment. Existing
    ``Log`` instances keep their own configuration.
    """
    global _SETTINGS  # noqa: PLW0603 - documented process-wide singleton
    logger = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False) or getattr(handler, _FILE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    _SETTINGS = None


def configure_log_file(
    file_path: Optional[str],
    *,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> Optional[RotatingFileHandler]:
    """Attach, replace or remove the managed log file.

    Parameters
    ----------
    file_path:
        Destination of uncolored log lines. ``None`` removes any managed file
        handler. Pointing at the current file again is a no-op.
    max_bytes, backup_count:
        Rotation policy (defaults: 10MB x 5 backups).

    Returns
    -------
    The active managed file handler, or ``None`` after removal.
    """
    settings = get_log_settings()
    logger = logging.getLogger(BASE_LOGGER_NAME)
    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]

    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path is not None else None
    existing: Optional[RotatingFileHandler] = None
    for handler in managed:
        if abs_path is not None and getattr(handler, "baseFilename", None) == abs_path:
            existing = handler  # type: ignore[assignment]
            continue
        logger.removeHandler(handler)
        with contextlib.suppress(Exception):
            handler.close()

    if abs_path is None:
        return None
    if existing is not None:
        existing.setLevel(settings.level)
        return existing

    directory = os.path.dirname(abs_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    handler = RotatingFileHandler(abs_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(LineFormatter())
    setattr(handler, _FILE_HANDLER_ATTR, True)
    logger.addHandler(handler)
    return handler


__all__ = [
    "BASE_LOGGER_NAME",
    "ConsoleHandler",
    "LogCallback",
    "LogSettings",
    "configure_log_file",
    "get_log_settings",
    "reset_log_settings",
]
