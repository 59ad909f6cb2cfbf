"""Console verbosity tiers."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering


@total_ordering
class ConsoleVerbosity(Enum):
    """How much detail the console backend renders per event.

    Each tier strictly adds to the previous one: ``SILENT`` writes nothing,
    ``MINIMAL`` the bare message, ``STANDARD`` adds timestamp and level,
    ``DETAILED`` adds subsystem, category and call-site metadata.
    """

    SILENT = 0
    MINIMAL = 1
    STANDARD = 2
    DETAILED = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ConsoleVerbosity):
            return NotImplemented
        return self.value < other.value

    @classmethod
    def from_name(cls, name: str) -> "ConsoleVerbosity":
        """Return the tier named ``name`` (case-insensitive).

        Examples
        --------
        >>> ConsoleVerbosity.from_name(" Detailed ")
        <ConsoleVerbosity.DETAILED: 3>
        """
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown console verbosity: {name!r}") from exc


__all__ = ["ConsoleVerbosity"]
