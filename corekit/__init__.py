"""corekit package

Small general-purpose building blocks for asyncio applications.

Public API (re-exported):
    - Version: ``__version__``
    - Cancellation: :class:`CancellationToken`, :class:`CancelledError`
    - Deferred results: :class:`Deferred`, :class:`DeferredTimeoutError`,
      :class:`DeferredRejectedError`
    - Logging: :class:`Log`, :class:`LogLevel`, :class:`LogConfig`,
      :class:`LogLevelError` (module functions live in ``corekit.logging``)
    - Events: :class:`EventEmitter`
    - Helpers: ``sleep``, ``sleep_ct``, ``await_event``, ``hex_encode``,
      ``limit``, ``round_to``, ``get_error_message`` and the 13/16-bit
      conversions

Notes:
    - ``corekit.logging`` is importable as a submodule; inside this package
      ``import logging`` still refers to the standard library.
"""

from .cancellation import CancellationToken, CancelledError
from .deferred import Deferred, DeferredRejectedError, DeferredTimeoutError, SettlementState
from .events import EventEmitter
from .logging import Log, LogConfig, LogLevel, LogLevelError
from .utils import (
    await_event,
    get_error_message,
    hex_encode,
    limit,
    round_to,
    signed13_from_unsigned13,
    signed16_from_unsigned16,
    sleep,
    sleep_ct,
    unsigned13_from_signed13,
    unsigned16_from_signed16,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    # Deferred
    "Deferred",
    "DeferredRejectedError",
    "DeferredTimeoutError",
    "SettlementState",
    # Events
    "EventEmitter",
    # Logging
    "Log",
    "LogConfig",
    "LogLevel",
    "LogLevelError",
    # Helpers
    "await_event",
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
