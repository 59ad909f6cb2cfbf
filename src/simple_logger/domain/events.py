"""Domain records describing a single log call.

Purpose
-------
Give backends a small immutable value to format instead of loose arguments,
and give the capture backend a tuple-like record to store.

Contents
--------
* :class:`LogEvent` - level, message and flat string metadata for one call.
* :class:`CapturedLog` - ``(level, message)`` pair kept by the capture store.
* Metadata key constants used by the facade and formatters.

System Role
-----------
Created at the facade/backend boundary and consumed synchronously by exactly
one backend; never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .levels import LogLevel

FUNCTION_KEY = "function"
FILE_KEY = "file"
LINE_KEY = "line"


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to a backend.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the event.
    message:
        Message passed by the caller, unmodified.
    metadata:
        Read-only copy of caller-supplied string pairs. ``None`` input becomes
        an empty mapping; :attr:`has_metadata` remembers the difference.
    """

    level: LogLevel
    message: str
    metadata: Mapping[str, str] = field(default_factory=dict)
    has_metadata: bool = True

    @classmethod
    def create(cls, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> "LogEvent":
        """Build an event from the backend capability arguments.

        Examples
        --------
        >>> event = LogEvent.create(LogLevel.INFO, "ready", {"line": "7"})
        >>> event.line, event.function
        ('7', '')
        >>> LogEvent.create(LogLevel.INFO, "ready").has_metadata
        False
        """
        if metadata is None:
            return cls(level=level, message=message, metadata=MappingProxyType({}), has_metadata=False)
        copied = {str(key): str(value) for key, value in metadata.items()}
        return cls(level=level, message=message, metadata=MappingProxyType(copied), has_metadata=True)

    @property
    def function(self) -> str:
        return self.metadata.get(FUNCTION_KEY, "")

    @property
    def file(self) -> str:
        return self.metadata.get(FILE_KEY, "")

    @property
    def line(self) -> str:
        return self.metadata.get(LINE_KEY, "")

    def call_site_suffix(self) -> str:
        """Return ``" in FUNCTION at FILE:LINE"`` with absent keys left empty."""

        return f" in {self.function} at {self.file}:{self.line}"


class CapturedLog(NamedTuple):
    """One entry of the capture store."""

    level: LogLevel
    message: str


__all__ = ["CapturedLog", "FILE_KEY", "FUNCTION_KEY", "LINE_KEY", "LogEvent"]
