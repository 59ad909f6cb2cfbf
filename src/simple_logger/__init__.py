"""Public package surface of the pluggable logging facade.

Host code picks a backend through one of the factories and logs through the
returned facade::

    import simple_logger

    logger = simple_logger.console(verbosity="standard")
    logger.info("ready")

Tests use :func:`mock` and assert on the captured entries.
"""

from __future__ import annotations

from .adapters import CaptureBackend, ConsoleBackend, NativeSeverity, PlatformLogBackend
from .application import Logger, LoggerBackendPort, LoggerFacade
from .domain import CapturedLog, ConsoleVerbosity, LogEvent, LogLevel
from .simple_logger import console, default, logdemo, mock, platform_log, summary_info

__all__ = [
    "CaptureBackend",
    "CapturedLog",
    "ConsoleBackend",
    "ConsoleVerbosity",
    "LogEvent",
    "LogLevel",
    "Logger",
    "LoggerBackendPort",
    "LoggerFacade",
    "NativeSeverity",
    "PlatformLogBackend",
    "console",
    "default",
    "logdemo",
    "mock",
    "platform_log",
    "summary_info",
]
