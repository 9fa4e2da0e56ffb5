"""Log entry value objects and severity levels."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Union

# Names used by stdlib logging and loguru that have no member of their own.
_LEVEL_ALIASES = {
    "TRACE": "DEBUG",
    "SUCCESS": "INFO",
    "WARN": "WARNING",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}


def format_time_of_day(timestamp: datetime) -> str:
    """Format a datetime as HH:MM:SS.mmm."""
    return f"{timestamp:%H:%M:%S}.{timestamp.microsecond // 1000:03d}"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position in the conventional debug < info < warning < error order."""
        return list(LogLevel).index(self)

    @classmethod
    def parse(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """Resolve a level member, name, or stdlib/loguru level name."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        name = _LEVEL_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown log level: {value!r}") from None

    @classmethod
    def from_levelno(cls, levelno: int) -> "LogLevel":
        if levelno < logging.INFO:
            return cls.DEBUG
        if levelno < logging.WARNING:
            return cls.INFO
        if levelno < logging.ERROR:
            return cls.WARNING
        return cls.ERROR


@dataclass(frozen=True)
class LogEntry:
    """A single recorded message."""

    message: str
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def formatted_message(self) -> str:
        return f"[{format_time_of_day(self.timestamp)}] [{self.level.display_name}] {self.message}"

    @property
    def console_line(self) -> str:
        return f"[{self.level.display_name}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict (JSON-safe)."""
        return {
            "id": str(self.id),
            "timestamp": self.timestamp.isoformat(timespec="milliseconds"),
            "level": self.level.value,
            "message": self.message,
        }
