"""Log entry data model."""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from diagnostics_tool.utils.errors import InvalidInputError


class LogLevel(str, Enum):
    """Log levels, least to most severe."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def label(self) -> str:
        """Upper-case display label (DEBUG, INFO, ...)."""
        return self.name

    @property
    def python_level(self) -> int:
        """Matching stdlib logging level."""
        return _PYTHON_LEVELS[self]

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        """Parse a level name or value, case-insensitively.

        Accepts "warn" as an alias for WARNING.

        Raises:
            InvalidInputError: If the text is not a known level
        """
        key = str(text).strip().lower()
        if key == "warn":
            key = "warning"
        for level in cls:
            if level.value == key:
                return level
        raise InvalidInputError(f"Unknown log level: {text!r}", field="level")


_PYTHON_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class LogEntry:
    """One recorded log event.

    The timestamp is assigned by the store at append time and is always
    timezone-aware UTC.
    """

    timestamp: datetime
    level: LogLevel
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "level": self.level.value,
            "message": self.message,
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())
