"""Shared pytest fixtures for logbuffer tests."""

from datetime import datetime

import pytest

from logbuffer import BoundedLogBuffer, LogEntry, LogLevel


@pytest.fixture
def console_lines():
    """Console sink that collects echoed lines instead of printing them."""
    lines = []
    return lines


@pytest.fixture
def buffer(console_lines):
    """A small isolated buffer echoing into ``console_lines``."""
    return BoundedLogBuffer(max_logs=3, console=console_lines.append)


@pytest.fixture
def sample_entries():
    """One entry per level at a fixed time of day."""
    ts = datetime(2024, 5, 1, 14, 3, 9, 42_000)
    return [
        LogEntry(message="starting", level=LogLevel.DEBUG, timestamp=ts),
        LogEntry(message="video loaded", level=LogLevel.INFO, timestamp=ts),
        LogEntry(message="low buffer", level=LogLevel.WARNING, timestamp=ts),
        LogEntry(message="decode failed", level=LogLevel.ERROR, timestamp=ts),
    ]
