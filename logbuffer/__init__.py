"""In-memory bounded log buffer with console echo."""

from .buffer import BoundedLogBuffer
from .config import LogBufferConfig
from .entry import LogEntry, LogLevel
from .handlers import BufferHandler, loguru_sink

__all__ = [
    "BoundedLogBuffer",
    "BufferHandler",
    "LogBufferConfig",
    "LogEntry",
    "LogLevel",
    "loguru_sink",
]
