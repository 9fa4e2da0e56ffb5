"""Bridges that feed existing log streams into a BoundedLogBuffer."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .buffer import BoundedLogBuffer
from .entry import LogLevel


class BufferHandler(logging.Handler):
    """Logging handler that records each formatted record in a buffer."""

    def __init__(self, buffer: BoundedLogBuffer, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.buffer = buffer
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.buffer.record(self.format(record), LogLevel.from_levelno(record.levelno))
        except Exception:
            self.handleError(record)


def loguru_sink(buffer: BoundedLogBuffer) -> Callable[[Any], None]:
    """Build a sink for ``loguru.logger.add`` that records into ``buffer``.

    Loguru-only levels (TRACE, SUCCESS, CRITICAL) fold into the nearest
    LogLevel; custom levels fall back to their severity number.
    """

    def sink(message: Any) -> None:
        record = message.record
        try:
            level = LogLevel.parse(record["level"].name)
        except ValueError:
            level = LogLevel.from_levelno(record["level"].no)
        buffer.record(record["message"], level)

    return sink
