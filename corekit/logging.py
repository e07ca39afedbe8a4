"""Leveled logger with per-instance context and call-chain context tagging.

Summary
-------
``Log`` instances format human-readable lines::

    2024-05-01T12:00:00.000Z [WARN ] <req-42> <db> pool exhausted

and relay every emitted line to the managed console handler (through the
stdlib ``corekit`` logger), to the instance callback and to the global
callback. The module-level functions (``info``, ``warn`` ...) log through the
shared global instance.

Level filtering is process-wide: ``set_level`` on any instance, or the module
function, changes the minimum level for all loggers.

Example
-------
```python
from corekit import logging as log

db_log = log.Log("db")
log.set_level("debug")

async def handle(request_id):
    db_log.info("query took %.1f ms", 12.5)

await log.set_async_context(f"req-{request_id}", lambda: handle(request_id))
```
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from .log_support import (
    LogConfig,
    LogLevel,
    LogLevelError,
    async_context,
    configure_log_file,
    format_message,
    get_async_context,
    get_log_settings,
    log_level_from_string,
    reset_log_settings,
    run_in_async_context,
)
from .log_support.levels import LevelLike, coerce_level
from .log_support.settings import BASE_LOGGER_NAME, LogCallback

_LINE_LOGGER_NAME = f"{BASE_LOGGER_NAME}.log"


class Log:
    """Leveled logger instance.

    Parameters
    ----------
    config:
        Context label, or a :class:`LogConfig`. Fields left unset are seeded
        from the process-wide defaults at construction time.
    color:
        Overrides ``config.color``.
    """

    def __init__(self, config: Union[str, LogConfig, None] = None, *, color: Optional[bool] = None) -> None:
        defaults = get_log_settings().defaults
        if isinstance(config, LogConfig):
            context, config_color = config.context, config.color
        else:
            context, config_color = config, None
        if color is not None:
            config_color = color

        self._config = LogConfig(
            context=context if context is not None else defaults.context,
            color=config_color if config_color is not None else bool(defaults.color),
        )
        self._callback: Optional[LogCallback] = None
        self._logger = logging.getLogger(_LINE_LOGGER_NAME)

    # ------------------------------------------------------------ config
    @staticmethod
    def set_defaults(config: Optional[LogConfig] = None, **fields: Any) -> LogConfig:
        """Set defaults for loggers created from now on.

        Only given (non-``None``) fields change; existing loggers are not
        affected.
        """
        cfg = _merge_config(config, fields)
        return get_log_settings().update_defaults(context=cfg.context, color=cfg.color)

    def set_config(self, config: Optional[LogConfig] = None, **fields: Any) -> None:
        """Reconfigure this logger.

        The context is always replaced (omitting it clears the context); the
        color flag only changes when given.
        """
        cfg = _merge_config(config, fields)
        self._config.context = cfg.context
        if cfg.color is not None:
            self._config.color = cfg.color

    @property
    def config(self) -> LogConfig:
        return self._config.model_copy()

    def get_context(self) -> Optional[str]:
        return self._config.context

    def set_log_callback(self, callback: Optional[LogCallback]) -> None:
        """Relay every line emitted by this logger to ``callback`` (uncolored)."""
        self._callback = callback

    def set_level(self, level: LevelLike) -> LogLevel:
        """Set the minimum level for *all* loggers."""
        return get_log_settings().set_level(level)

    def get_level(self) -> LogLevel:
        return get_log_settings().level

    def set_async_context(self, context: str, callback: Callable[[], Any]) -> Any:
        """Run ``callback`` with ``context`` as ambient label (see module function)."""
        return run_in_async_context(context, callback)

    # ----------------------------------------------------------- logging
    def log(self, message: Any = "", level: LevelLike = LogLevel.INFO, *args: Any) -> None:
        """Log ``message`` at ``level``; ``args`` are printf-style substitutions."""
        settings = get_log_settings()
        lvl = coerce_level(level)
        if lvl < settings.level:
            return

        text = format_message(str(message), args)
        record = self._logger.makeRecord(
            self._logger.name,
            int(lvl),
            "",
            0,
            text,
            (),
            None,
            extra={
                "log_context": self._config.context,
                "async_context": get_async_context(),
                "use_color": bool(self._config.color),
            },
        )
        line = settings.formatter.format(record)
        self._logger.handle(record)

        if self._callback is not None:
            self._callback(line)
        if settings.global_callback is not None:
            settings.global_callback(line)

    def trace(self, message: Any = "", *args: Any) -> None:
        self.log(message, LogLevel.TRACE, *args)

    def debug(self, message: Any = "", *args: Any) -> None:
        self.log(message, LogLevel.DEBUG, *args)

    def info(self, message: Any = "", *args: Any) -> None:
        self.log(message, LogLevel.INFO, *args)

    def warn(self, message: Any = "", *args: Any) -> None:
        self.log(message, LogLevel.WARN, *args)

    warning = warn

    def error(self, message: Any = "", *args: Any) -> None:
        self.log(message, LogLevel.ERROR, *args)

    def fatal(self, message: Any = "", *args: Any) -> None:
        self.log(message, LogLevel.FATAL, *args)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Log(context={self._config.context!r}, color={self._config.color})"


def _merge_config(config: Optional[LogConfig], fields: dict) -> LogConfig:
    if config is None:
        return LogConfig(**fields)
    return LogConfig.model_validate({**config.model_dump(), **fields})


# ---------------------- Global log ------------------------------------------


def get_global_log() -> Log:
    """Return the shared global logger (created on first use)."""
    settings = get_log_settings()
    if settings.global_log is None:
        settings.global_log = Log()
    return settings.global_log


def log(message: Any = "", level: LevelLike = LogLevel.INFO, *args: Any) -> None:
    get_global_log().log(message, level, *args)


def trace(message: Any = "", *args: Any) -> None:
    get_global_log().log(message, LogLevel.TRACE, *args)


def debug(message: Any = "", *args: Any) -> None:
    get_global_log().log(message, LogLevel.DEBUG, *args)


def info(message: Any = "", *args: Any) -> None:
    get_global_log().log(message, LogLevel.INFO, *args)


def warn(message: Any = "", *args: Any) -> None:
    get_global_log().log(message, LogLevel.WARN, *args)


def error(message: Any = "", *args: Any) -> None:
    get_global_log().log(message, LogLevel.ERROR, *args)


def fatal(message: Any = "", *args: Any) -> None:
    get_global_log().log(message, LogLevel.FATAL, *args)


def set_level(level: LevelLike) -> LogLevel:
    """Set the minimum level for the global log and all instances."""
    return get_log_settings().set_level(level)


def get_level() -> LogLevel:
    return get_log_settings().level


def set_defaults(config: Optional[LogConfig] = None, **fields: Any) -> LogConfig:
    return Log.set_defaults(config, **fields)


def set_global_config(config: Optional[LogConfig] = None, **fields: Any) -> None:
    """Reconfigure the global log (same semantics as ``Log.set_config``)."""
    get_global_log().set_config(config, **fields)


def set_global_log_callback(callback: Optional[LogCallback]) -> None:
    """Relay every line emitted by *any* logger to ``callback``."""
    get_log_settings().global_callback = callback


def set_async_context(context: str, callback: Callable[[], Any]) -> Any:
    """Run ``callback()`` with ``context`` as the ambient label.

    Every log call made during the callback's dynamic extent is tagged
    ``<context>``. When the callback returns an awaitable, the returned
    coroutine keeps the label bound while it runs, across suspension points
    and in tasks spawned from it; await it to obtain the result.
    """
    return run_in_async_context(context, callback)


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return a stdlib logger sharing the managed ``corekit`` handlers.

    Names outside the ``corekit`` hierarchy are nested under it.
    """
    get_log_settings()
    if name != BASE_LOGGER_NAME and not name.startswith(f"{BASE_LOGGER_NAME}."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = [
    "Log",
    "LogConfig",
    "LogLevel",
    "LogLevelError",
    "async_context",
    "configure_log_file",
    "debug",
    "error",
    "fatal",
    "get_async_context",
    "get_global_log",
    "get_level",
    "get_log_settings",
    "get_logger",
    "info",
    "log",
    "log_level_from_string",
    "reset_log_settings",
    "set_async_context",
    "set_defaults",
    "set_global_config",
    "set_global_log_callback",
    "set_level",
    "trace",
    "warn",
]
