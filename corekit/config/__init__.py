"""Configuration helpers (environment-driven defaults).

Public API
----------
* read_env(field) -> str | None
* parse_bool(value, default=False) -> bool
* ENV_MAP
"""

from .env import ENV_MAP, get_env_var_name, parse_bool, read_env

__all__ = ["ENV_MAP", "get_env_var_name", "parse_bool", "read_env"]
