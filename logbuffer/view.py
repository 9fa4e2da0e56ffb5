"""Plain-text rendering of buffer snapshots for a debug log panel."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Union

from .entry import LogEntry, LogLevel

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "gray",
    LogLevel.INFO: "white",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}

# loguru markup tag for each display colour
_MARKUP_TAGS = {
    "gray": "light-black",
    "white": "white",
    "yellow": "yellow",
    "red": "red",
}

# tag shape recognised by loguru's markup parser; one backslash in front escapes it
_TAG_RE = re.compile(r"</?(?:[fb]g\s)?[^<>\s]*>")
_TRAILING_BACKSLASHES_RE = re.compile(r"\\+$")


def escape_markup(text: str) -> str:
    """Escape loguru colour markup so message text is shown literally.

    Only tag-shaped substrings get a backslash; any other ``<`` or ``\\``
    is already literal to loguru.
    """
    return _TAG_RE.sub(lambda m: "\\" + m.group(0), text)


def filter_entries(
    entries: Iterable[LogEntry],
    min_level: Optional[Union[LogLevel, str]] = None,
    levels: Optional[Iterable[Union[LogLevel, str]]] = None,
) -> List[LogEntry]:
    """Keep entries matching an explicit level set and/or a minimum level."""
    result = list(entries)
    if levels is not None:
        wanted = {LogLevel.parse(level) for level in levels}
        result = [entry for entry in result if entry.level in wanted]
    if min_level is not None:
        floor = LogLevel.parse(min_level).rank
        result = [entry for entry in result if entry.level.rank >= floor]
    return result


def colorize_line(entry: LogEntry) -> str:
    tag = _MARKUP_TAGS[LEVEL_COLORS[entry.level]]
    text = escape_markup(entry.formatted_message)
    # a backslash right before the closing tag would escape it
    match = _TRAILING_BACKSLASHES_RE.search(text)
    tail = match.group(0) if match else ""
    body = text[: len(text) - len(tail)]
    return f"<{tag}>{body}</{tag}>{tail}"


def render(entries: Iterable[LogEntry], limit: Optional[int] = None, colorize: bool = False) -> str:
    """Render entries oldest first, one formatted line each.

    ``limit`` keeps only the newest lines, like a panel scrolled to the bottom.
    With ``colorize`` each line is wrapped in loguru markup for its level.
    """
    entries = list(entries)
    if limit is not None:
        entries = entries[-limit:] if limit > 0 else []
    if colorize:
        return "\n".join(colorize_line(entry) for entry in entries)
    return "\n".join(entry.formatted_message for entry in entries)


def header(entries: Iterable[LogEntry]) -> str:
    return f"Debug Log ({len(list(entries))} entries)"
