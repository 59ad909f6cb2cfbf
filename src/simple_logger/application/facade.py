"""Convenience facade funnelling ``debug/info/warning/error`` into ``log``.

Purpose
-------
Give host code level-specific helpers while every backend only implements the
single :class:`~simple_logger.application.ports.backend.LoggerBackendPort`
capability.

Contents
--------
* :class:`LoggerFacade` - abstract base providing the convenience calls on top of ``log``.
* :class:`Logger` - facade wrapping any backend instance.

System Role
-----------
Sits between callers and backends. Call-site metadata (file, function, line)
is collected here so backends receive plain string pairs.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping

from simple_logger.application.ports.backend import LoggerBackendPort
from simple_logger.domain.events import FILE_KEY, FUNCTION_KEY, LINE_KEY
from simple_logger.domain.levels import LogLevel

# Frames between the caller and ``_call_site``: _call_site <- _emit <- debug/info/...
_CALLER_DEPTH = 3


def _call_site(depth: int) -> tuple[str, str, int]:
    frame = sys._getframe(depth)
    return Path(frame.f_code.co_filename).name, frame.f_code.co_name, frame.f_lineno


def build_metadata(file: str, function: str, line: int | str) -> dict[str, str]:
    """Return the metadata mapping carried by facade calls.

    Examples
    --------
    >>> build_metadata("net.py", "connect", 42)
    {'file': 'net.py', 'function': 'connect', 'line': '42'}
    """

    return {FILE_KEY: file, FUNCTION_KEY: function, LINE_KEY: str(line)}


class LoggerFacade(ABC):
    """Abstract base adding level helpers on top of ``log``.

    Omitted ``file``/``function``/``line`` arguments are taken from the
    calling frame.
    """

    @abstractmethod
    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        """Deliver one event to the concrete sink."""

    def debug(self, message: str, *, file: str | None = None, function: str | None = None, line: int | None = None) -> None:
        """Emit a ``DEBUG`` message."""
        self._emit(LogLevel.DEBUG, message, file, function, line)

    def info(self, message: str, *, file: str | None = None, function: str | None = None, line: int | None = None) -> None:
        """Emit an ``INFO`` message."""
        self._emit(LogLevel.INFO, message, file, function, line)

    def warning(self, message: str, *, file: str | None = None, function: str | None = None, line: int | None = None) -> None:
        """Emit a ``WARNING`` message for notable but non-fatal conditions."""
        self._emit(LogLevel.WARNING, message, file, function, line)

    def error(self, message: str, *, file: str | None = None, function: str | None = None, line: int | None = None) -> None:
        """Emit an ``ERROR`` message signalling failures."""
        self._emit(LogLevel.ERROR, message, file, function, line)

    def log_at(self, message: str, level: LogLevel, file: str, function: str, line: int) -> None:
        """Log ``message`` with explicit call-site information."""
        self.log(level, message, build_metadata(file, function, line))

    def _emit(self, level: LogLevel, message: str, file: str | None, function: str | None, line: int | None) -> None:
        if file is None or function is None or line is None:
            site_file, site_function, site_line = _call_site(_CALLER_DEPTH)
            file = site_file if file is None else file
            function = site_function if function is None else function
            line = site_line if line is None else line
        self.log(level, message, build_metadata(file, function, line))


class Logger(LoggerFacade):
    """Facade bound to one backend.

    Examples
    --------
    >>> from simple_logger.adapters.capture import CaptureBackend
    >>> capture = CaptureBackend()
    >>> logger = Logger(capture)
    >>> logger.info("ready")
    >>> capture.get_last_log()
    CapturedLog(level=<LogLevel.INFO: 20>, message='ready')
    """

    def __init__(self, backend: LoggerBackendPort) -> None:
        self._backend = backend

    @property
    def backend(self) -> LoggerBackendPort:
        """Return the wrapped backend."""
        return self._backend

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        """Delegate to the wrapped backend."""
        self._backend.log(level, message, metadata)


__all__ = ["Logger", "LoggerFacade", "build_metadata"]
