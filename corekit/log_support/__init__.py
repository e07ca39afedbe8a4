"""Auxiliary logging helpers (levels, formatters, context, settings) used by corekit.logging."""

from .async_context import async_context, get_async_context, run_in_async_context
from .levels import LogLevel, LogLevelError, coerce_level, log_level_from_string
from .line_formatter import ColorLineFormatter, LineFormatter, format_message
from .log_config import LogConfig
from .settings import LogSettings, configure_log_file, get_log_settings, reset_log_settings

__all__ = [
    "ColorLineFormatter",
    "LineFormatter",
    "LogConfig",
    "LogLevel",
    "LogLevelError",
    "LogSettings",
    "async_context",
    "coerce_level",
    "configure_log_file",
    "format_message",
    "get_async_context",
    "get_log_settings",
    "log_level_from_string",
    "reset_log_settings",
    "run_in_async_context",
]
