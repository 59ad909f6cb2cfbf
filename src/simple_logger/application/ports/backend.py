"""Backend port: the single capability every log sink implements.

Purpose
-------
Decouple callers from the concrete sink. The facade only ever calls
:meth:`LoggerBackendPort.log`; console, journald and capture backends plug in
behind it.

Contents
--------
* :class:`LoggerBackendPort` - runtime-checkable protocol with one ``log`` method.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from simple_logger.domain.levels import LogLevel


@runtime_checkable
class LoggerBackendPort(Protocol):
    """Log one event given a level, a message and optional metadata."""

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        """Handle the event; must never raise into the caller."""


__all__ = ["LoggerBackendPort"]
