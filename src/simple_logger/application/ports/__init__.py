"""Protocols describing the boundaries between the facade and its adapters."""

from __future__ import annotations

from .backend import LoggerBackendPort
from .native import NativeSender
from .time import ClockPort

__all__ = ["ClockPort", "LoggerBackendPort", "NativeSender"]
