"""Concrete backends implementing :class:`LoggerBackendPort`."""

from __future__ import annotations

from .capture import CaptureBackend
from .console.console_backend import ConsoleBackend
from .structured.platform_log import NativeSeverity, PlatformLogBackend, journald_available

__all__ = [
    "CaptureBackend",
    "ConsoleBackend",
    "NativeSeverity",
    "PlatformLogBackend",
    "journald_available",
]
