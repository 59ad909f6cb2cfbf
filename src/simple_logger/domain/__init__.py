"""Domain value objects used by the logging facade."""

from __future__ import annotations

from .events import CapturedLog, LogEvent
from .levels import LogLevel
from .verbosity import ConsoleVerbosity

__all__ = [
    "CapturedLog",
    "ConsoleVerbosity",
    "LogEvent",
    "LogLevel",
]
