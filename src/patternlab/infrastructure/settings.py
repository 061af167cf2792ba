"""Runtime settings read from the environment.

Only presentation concerns live here; nothing in the domain reads them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from patternlab.domain.model.filesystem import INDENT_UNIT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _indent_unit(raw: str) -> str:
    """A non-negative number of spaces; anything else keeps the default."""
    try:
        width = int(raw)
    except ValueError:
        return INDENT_UNIT
    return " " * width if width >= 0 else INDENT_UNIT


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    indent_unit: str = INDENT_UNIT
    currency: str = "USD"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        indent = env.get("PATTERNLAB_INDENT", "")
        return cls(
            log_level=env.get("PATTERNLAB_LOG_LEVEL", cls.log_level),
            indent_unit=_indent_unit(indent),
            currency=env.get("PATTERNLAB_CURRENCY", cls.currency),
        )
