"""Line rendering for the console backend.

Why
---
The verbosity tiers and the colour policy are pure string transformations.
Keeping them here lets the console backend stay focused on stream handling
and lets tests check formatting without touching real file descriptors.

Contents
--------
* :data:`TIMESTAMP_FORMAT` - ``strftime`` pattern for console timestamps.
* :data:`LEVEL_STYLES` - Rich style names per :class:`LogLevel`.
* :func:`format_line` - render an event for a verbosity tier.
* :func:`colorize_line` - wrap a rendered line in the ANSI colour of its level.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from rich.color import ColorSystem
from rich.style import Style

from simple_logger.domain.events import LogEvent
from simple_logger.domain.levels import LogLevel
from simple_logger.domain.verbosity import ConsoleVerbosity

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_STYLES: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "bright_black",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}
#: Rich colour names; rendered with the 16-colour system they become SGR 90/36/33/31.


def format_timestamp(moment: datetime) -> str:
    """Return ``moment`` as ``YYYY-MM-DD HH:MM:SS``.

    Examples
    --------
    >>> format_timestamp(datetime(2025, 1, 2, 3, 4, 5))
    '2025-01-02 03:04:05'
    """

    return moment.strftime(TIMESTAMP_FORMAT)


def format_line(
    event: LogEvent,
    *,
    verbosity: ConsoleVerbosity,
    subsystem: str,
    category: str,
    moment: datetime,
) -> str | None:
    """Render ``event`` for ``verbosity``; ``None`` means nothing to write.

    Examples
    --------
    >>> event = LogEvent.create(LogLevel.ERROR, "conn failed", {"function": "connect", "file": "net.go", "line": "42"})
    >>> format_line(event, verbosity=ConsoleVerbosity.DETAILED, subsystem="app", category="db", moment=datetime(2025, 1, 2, 3, 4, 5))
    '2025-01-02 03:04:05 [ERROR] app[db] conn failed in connect at net.go:42'
    >>> format_line(event, verbosity=ConsoleVerbosity.MINIMAL, subsystem="app", category="db", moment=datetime(2025, 1, 2))
    'conn failed'
    """

    if verbosity is ConsoleVerbosity.SILENT:
        return None
    if verbosity is ConsoleVerbosity.MINIMAL:
        return event.message

    prefix = f"{format_timestamp(moment)} {event.level.label}"
    if verbosity is ConsoleVerbosity.STANDARD:
        return f"{prefix} {event.message}"

    category_part = f"[{category}]" if category else ""
    return f"{prefix} {subsystem}{category_part} {event.message}{event.call_site_suffix()}"


def colorize_line(line: str, styles: Mapping[LogLevel, str] = LEVEL_STYLES) -> str:
    """Wrap ``line`` in the ANSI colour of the first level label it contains.

    Lines without a ``[LEVEL]`` label (e.g. minimal output) pass through.

    Examples
    --------
    >>> colorize_line("2025-01-02 03:04:05 [INFO] ready")
    '\\x1b[36m2025-01-02 03:04:05 [INFO] ready\\x1b[0m'
    >>> colorize_line("ready")
    'ready'
    """

    for level in LogLevel:
        if level.label in line:
            return Style.parse(styles[level]).render(line, color_system=ColorSystem.STANDARD)
    return line


__all__ = ["LEVEL_STYLES", "TIMESTAMP_FORMAT", "colorize_line", "format_line", "format_timestamp"]
