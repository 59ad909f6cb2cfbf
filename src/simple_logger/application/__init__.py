"""Application layer: backend ports and the convenience facade."""

from __future__ import annotations

from .facade import Logger, LoggerFacade
from .ports import ClockPort, LoggerBackendPort, NativeSender

__all__ = ["ClockPort", "Logger", "LoggerBackendPort", "LoggerFacade", "NativeSender"]
