"""Log level abstraction shared by every backend.

Purpose
-------
Offer an ordered severity enum so backends can filter and map levels without
reaching for raw integers.

Contents
--------
* :class:`LogLevel` enum with name lookup and ordering.

System Role
-----------
Used by the facade to tag events and by the adapters to pick console labels,
journald priorities, and capture filters.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Enumerated logging levels ordered ``DEBUG < INFO < WARNING < ERROR``."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def label(self) -> str:
        """Return the bracketed console label, e.g. ``[INFO]``.

        Examples
        --------
        >>> LogLevel.WARNING.label
        '[WARNING]'
        """

        return f"[{self.name}]"

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


__all__ = ["LogLevel"]
