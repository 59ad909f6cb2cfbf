"""Console backend writing verbosity-tiered lines to stdout or stderr.

Purpose
-------
Primary human-facing sink. Renders each event according to a
:class:`ConsoleVerbosity` tier, optionally colours it for terminals, and writes
it synchronously with a flush so every call is visible before it returns.

Contents
--------
* :class:`ConsoleBackend` - concrete :class:`LoggerBackendPort` implementation.

System Role
-----------
Used directly by host code or through :func:`simple_logger.console`. Holds only
immutable configuration, so concurrent calls need no locking; lines from
concurrent writers may interleave when the stream write is not atomic.
"""

from __future__ import annotations

import io
import logging
import os
import sys
from datetime import datetime
from typing import IO, Any, Callable, Mapping

from simple_logger.adapters._formatting import colorize_line, format_line
from simple_logger.application.facade import LoggerFacade
from simple_logger.application.ports.time import ClockPort
from simple_logger.domain.events import LogEvent
from simple_logger.domain.levels import LogLevel
from simple_logger.domain.verbosity import ConsoleVerbosity

LOGGER = logging.getLogger(__name__)

IsTerminal = Callable[[], bool]


class _LocalClock(ClockPort):
    """Wall clock in the local timezone."""

    def now(self) -> datetime:
        return datetime.now()


def _stdio_is_terminal() -> bool:
    """Return ``True`` when stdout or stderr is attached to a terminal."""
    for fd in (1, 2):
        try:
            if os.isatty(fd):
                return True
        except OSError:
            continue
    return False


class ConsoleBackend(LoggerFacade):
    """Render log events to a text stream.

    Parameters
    ----------
    subsystem, category:
        Identifiers shown in ``DETAILED`` output; an empty category drops the
        ``[category]`` bracket.
    verbosity:
        Rendering tier; ``SILENT`` turns every call into a no-op.
    use_stderr:
        Write to ``sys.stderr`` instead of ``sys.stdout``.
    enable_colors:
        Colour lines by level when stdout or stderr is a terminal.
    enabled:
        Result of the environment toggle, evaluated once by the caller.
    stream:
        Explicit target stream; overrides ``use_stderr``.
    clock:
        Timestamp source; defaults to the local wall clock.
    is_terminal:
        Terminal probe, consulted on every coloured call.
    """

    def __init__(
        self,
        *,
        subsystem: str = "console logger",
        category: str = "",
        verbosity: ConsoleVerbosity = ConsoleVerbosity.DETAILED,
        use_stderr: bool = False,
        enable_colors: bool = True,
        enabled: bool = True,
        stream: IO[Any] | None = None,
        clock: ClockPort | None = None,
        is_terminal: IsTerminal | None = None,
    ) -> None:
        self._subsystem = subsystem
        self._category = category
        self._verbosity = verbosity
        self._use_stderr = use_stderr
        self._enable_colors = enable_colors
        self._enabled = enabled
        self._stream = stream
        self._clock = clock or _LocalClock()
        self._is_terminal = is_terminal or _stdio_is_terminal

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @property
    def category(self) -> str:
        return self._category

    @property
    def verbosity(self) -> ConsoleVerbosity:
        return self._verbosity

    @property
    def use_stderr(self) -> bool:
        return self._use_stderr

    @property
    def enable_colors(self) -> bool:
        return self._enable_colors

    @property
    def enabled(self) -> bool:
        """Return ``False`` when the environment toggle disabled this instance."""
        return self._enabled

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        """Render and write one line; never raises."""
        if not self._enabled or self._verbosity is ConsoleVerbosity.SILENT:
            return

        event = LogEvent.create(level, message, metadata)
        line = format_line(
            event,
            verbosity=self._verbosity,
            subsystem=self._subsystem,
            category=self._category,
            moment=self._clock.now(),
        )
        if line is None:
            return
        if self._enable_colors and self._is_terminal():
            line = colorize_line(line)
        self._write(line)

    def _target(self) -> IO[Any] | None:
        if self._stream is not None:
            return self._stream
        return sys.stderr if self._use_stderr else sys.stdout

    def _write(self, line: str) -> None:
        """Write ``line`` plus newline as UTF-8 and flush the stream.

        Unencodable characters become ``?``. Byte streams receive the encoded
        line; every other stream receives text.
        """
        stream = self._target()
        if stream is None:
            return
        buffer = getattr(stream, "buffer", None)
        try:
            data = (line + "\n").encode("utf-8", errors="replace")
            if buffer is not None:
                stream.flush()
                buffer.write(data)
            elif isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
                stream.write(data)
            else:
                stream.write(data.decode("utf-8"))
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Console write failed; dropping line", exc_info=exc)
            return
        self._flush(buffer if buffer is not None else stream)

    @staticmethod
    def _flush(target: IO[Any]) -> None:
        try:
            target.flush()
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Console flush failed", exc_info=exc)


__all__ = ["ConsoleBackend"]
