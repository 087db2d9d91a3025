"""Config settings – Settings base class and LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from optval.config.validation import InvalidSettingValueError

_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging options, read from ``OPTVAL_LOG_LEVEL`` and ``OPTVAL_LOG_JSON``."""

    _prefix: ClassVar[str] = "OPTVAL_LOG"

    level: str = "WARNING"
    json: bool = False

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in _LEVELS:
            raise InvalidSettingValueError(
                "level", self.level, f"expected one of {sorted(_LEVELS)}"
            )

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["LoggingSettings", "Settings"]
