"""corekit.config.env
==================

Centralized environment variable mapping for process-wide logger settings.

Purpose
-------
- Provide a single source of truth for the environment variables that seed
  the process-wide log settings (minimum level, default color, default
  context).
- Offer small helpers to read and normalize those values.

Failure Modes
-------------
- Unset or blank variables are reported as ``None``; callers apply defaults.
- ``parse_bool`` never raises; unrecognized values fall back to ``default``.
- Level strings are *not* validated here; ``corekit.logging`` parses them and
  raises ``LogLevelError`` for unknown names.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

# Setting field -> env var
ENV_MAP: Dict[str, str] = {
    "level": "COREKIT_LOG_LEVEL",
    "color": "COREKIT_LOG_COLOR",
    "context": "COREKIT_LOG_CONTEXT",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def get_env_var_name(field: str) -> Optional[str]:
    """Return the environment variable name for a settings field, if any."""
    return ENV_MAP.get(field)


def read_env(field: str) -> Optional[str]:
    """Return the stripped value of the variable mapped to ``field``.

    Returns ``None`` when the field is unknown or the variable is unset/blank.
    """
    name = get_env_var_name(field)
    if not name:
        return None
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Interpret common truthy/falsy spellings case-insensitively."""
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return default


__all__ = ["ENV_MAP", "get_env_var_name", "parse_bool", "read_env"]
