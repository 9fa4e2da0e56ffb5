"""Thread-safe bounded buffer of recent log entries."""

from __future__ import annotations

import logging
import sys
from collections import deque
from threading import Lock, RLock
from typing import Callable, Deque, List, Optional, Union

from .config import DEFAULT_MAX_LOGS, LogBufferConfig
from .entry import LogEntry, LogLevel

logger = logging.getLogger(__name__)

ConsoleSink = Callable[[str], None]
Listener = Callable[[List[LogEntry]], None]


def write_stdout_line(line: str) -> None:
    """Default console sink: one line on the current stdout."""
    stream = sys.stdout
    stream.write(line + "\n")
    if hasattr(stream, "flush"):
        stream.flush()


class BoundedLogBuffer:
    """Keep the most recent ``max_logs`` entries, oldest first.

    Append, truncate, copy and clear all run under a single lock, so a
    snapshot never contains a partially applied mutation. The console echo and
    listener callbacks run after the lock is released.

    Every mutation gets a version number under the lock. Listeners only ever
    receive snapshots newer than the last one delivered, so the final
    notification always matches the buffer's current contents even when
    threads finish their echo out of order.
    """

    def __init__(
        self,
        max_logs: int = DEFAULT_MAX_LOGS,
        *,
        console: Optional[ConsoleSink] = None,
        echo: bool = True,
    ) -> None:
        if max_logs < 1:
            raise ValueError(f"max_logs must be at least 1, got {max_logs}")
        self._max_logs = max_logs
        self._entries: Deque[LogEntry] = deque()
        self._lock = Lock()
        self._listeners: List[Listener] = []
        self._version = 0
        # reentrant so a listener may itself record or clear
        self._notify_lock = RLock()
        self._delivered = 0
        self._console = console or write_stdout_line
        self._echo = echo

    @classmethod
    def from_config(cls, config: LogBufferConfig, *, console: Optional[ConsoleSink] = None) -> "BoundedLogBuffer":
        return cls(config.max_logs, console=console, echo=config.echo)

    @property
    def max_logs(self) -> int:
        return self._max_logs

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_logs={self._max_logs}, entries={len(self)})"

    def record(self, message: str, level: Union[LogLevel, str] = LogLevel.INFO) -> None:
        entry = LogEntry(message=message, level=LogLevel.parse(level))

        with self._lock:
            self._entries.append(entry)
            while len(self._entries) > self._max_logs:
                self._entries.popleft()
            self._version += 1
            version = self._version
            listeners = list(self._listeners)
            current = list(self._entries) if listeners else None

        if self._echo:
            self._write_console(entry.console_line)
        if listeners:
            self._notify(version, listeners, current)

    def debug(self, message: str) -> None:
        self.record(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self.record(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.record(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.record(message, LogLevel.ERROR)

    def snapshot(self) -> List[LogEntry]:
        """Return an independent copy of the retained entries."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._version += 1
            version = self._version
            listeners = list(self._listeners)

        if listeners:
            self._notify(version, listeners, [])

    def _write_console(self, line: str) -> None:
        # entry is stored either way; listeners still run
        try:
            self._console(line)
        except Exception:
            logger.exception("Console sink %r failed", self._console)

    # --- Listeners ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(snapshot)`` after record and clear.

        A snapshot older than one already delivered is skipped. Returns a
        callable that removes the listener again.
        """
        with self._lock:
            self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    def _notify(self, version: int, listeners: List[Listener], entries: List[LogEntry]) -> None:
        with self._notify_lock:
            if version <= self._delivered:
                return
            self._delivered = version
            for listener in listeners:
                # a listener that mutated the buffer already delivered newer state
                if self._delivered != version:
                    return
                try:
                    listener(list(entries))
                except Exception:
                    logger.exception("Log buffer listener %r failed", listener)
