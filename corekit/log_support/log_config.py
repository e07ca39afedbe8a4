"""Logger configuration DTO.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump`` convenience.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class LogConfig(BaseModel):
    """Per-instance (or default) logger configuration.

    Attributes
    ----------
    context:
        Label rendered as ``<context>`` in every line of the logger.
    color:
        Whether console output is colorized. ``None`` means "not specified"
        and defers to the process-wide defaults.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    context: Optional[str] = None
    color: Optional[bool] = None


__all__ = ["LogConfig"]
