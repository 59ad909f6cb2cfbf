"""Platform log backend writing into systemd-journald.

Purpose
-------
Adapt facade events to the operating system's native log facility, mapping
levels onto native severities and deciding how much call-site detail to send.

Contents
--------
* :class:`NativeSeverity` - severities understood by the native facility.
* :data:`_PRIORITY_MAP` - syslog priorities used by journald.
* :func:`journald_available` - probe for the default transport.
* :class:`PlatformLogBackend` - concrete :class:`LoggerBackendPort` implementation.

System Role
-----------
Transforms events into journald field dictionaries and invokes
``systemd.journal.send`` (or a supplied sender). Journald has no redaction
markers, so every field is sent as public text.
"""

from __future__ import annotations

import importlib.util
import logging
import sys
from enum import Enum
from typing import Any, Mapping

from simple_logger.application.facade import LoggerFacade
from simple_logger.application.ports.native import NativeSender
from simple_logger.domain.events import LogEvent
from simple_logger.domain.levels import LogLevel

LOGGER = logging.getLogger(__name__)


class NativeSeverity(Enum):
    """Severities of the native log facility."""

    DEBUG = "debug"
    INFO = "info"
    DEFAULT = "default"
    ERROR = "error"
    FAULT = "fault"


#: Map :class:`NativeSeverity` to syslog numeric priorities.
_PRIORITY_MAP = {
    NativeSeverity.DEBUG: 7,
    NativeSeverity.INFO: 6,
    NativeSeverity.DEFAULT: 5,
    NativeSeverity.ERROR: 3,
    NativeSeverity.FAULT: 2,
}


def _default_sender(**fields: Any) -> None:  # pragma: no cover - depends on systemd
    """Proxy to :func:`systemd.journal.send`, raising if unavailable."""
    try:
        from systemd import journal
    except ImportError as exc:  # pragma: no cover - executed only when systemd missing
        raise RuntimeError("systemd.journal is not available") from exc
    journal.send(**fields)


def journald_available() -> bool:
    """Return ``True`` when the default journald transport can be used."""

    if not sys.platform.startswith("linux"):
        return False
    try:
        return importlib.util.find_spec("systemd.journal") is not None
    except ModuleNotFoundError:
        return False


def native_severity(level: LogLevel, *, enhanced_warnings: bool = False) -> NativeSeverity:
    """Map ``level`` to the native severity.

    Examples
    --------
    >>> native_severity(LogLevel.WARNING)
    <NativeSeverity.DEFAULT: 'default'>
    >>> native_severity(LogLevel.WARNING, enhanced_warnings=True)
    <NativeSeverity.FAULT: 'fault'>
    """

    if level is LogLevel.DEBUG:
        return NativeSeverity.DEBUG
    if level is LogLevel.INFO:
        return NativeSeverity.INFO
    if level is LogLevel.WARNING:
        return NativeSeverity.FAULT if enhanced_warnings else NativeSeverity.DEFAULT
    return NativeSeverity.ERROR


class PlatformLogBackend(LoggerFacade):
    """Emit log events via the native log facility.

    Parameters
    ----------
    subsystem, category:
        Channel identifiers; both must contain non-whitespace characters.
    enhanced_warnings:
        Map warnings to :attr:`NativeSeverity.FAULT` for extra visibility.
    verbose_metadata:
        ``True`` sends every level with ``in FUNCTION at FILE:LINE`` appended;
        ``False`` drops ``DEBUG`` events and keeps the bare message.
        Defaults to :data:`__debug__`.
    enabled:
        Result of the environment toggle, evaluated once by the caller.
    sender:
        Native transport; defaults to ``systemd.journal.send``.

    Raises
    ------
    ValueError
        If ``subsystem`` or ``category`` is blank.
    """

    def __init__(
        self,
        *,
        subsystem: str,
        category: str,
        enhanced_warnings: bool = False,
        verbose_metadata: bool = __debug__,
        enabled: bool = True,
        sender: NativeSender | None = None,
    ) -> None:
        if not subsystem.strip() or not category.strip():
            raise ValueError("subsystem and category cannot be empty")
        self._subsystem = subsystem
        self._category = category
        self._enhanced_warnings = enhanced_warnings
        self._verbose_metadata = verbose_metadata
        self._enabled = enabled
        self._sender = sender or _default_sender

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @property
    def category(self) -> str:
        return self._category

    @property
    def enhanced_warnings(self) -> bool:
        return self._enhanced_warnings

    @property
    def verbose_metadata(self) -> bool:
        return self._verbose_metadata

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        """Send one record to the native facility; never raises."""
        if not self._enabled:
            return
        if not self._verbose_metadata and level <= LogLevel.DEBUG:
            return

        fields = self._build_fields(LogEvent.create(level, message, metadata))
        try:
            self._sender(**fields)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Native log transport failed; dropping event", exc_info=exc)

    def _build_fields(self, event: LogEvent) -> dict[str, Any]:
        """Construct the journald field dictionary for ``event``.

        Examples
        --------
        >>> backend = PlatformLogBackend(subsystem="app", category="db", verbose_metadata=False, sender=lambda **f: None)
        >>> fields = backend._build_fields(LogEvent.create(LogLevel.ERROR, "down", {"line": "3"}))
        >>> fields["MESSAGE"], fields["PRIORITY"], fields["CATEGORY"]
        ('down', 3, 'db')
        """
        severity = native_severity(event.level, enhanced_warnings=self._enhanced_warnings)
        message = event.message
        fields: dict[str, Any] = {
            "PRIORITY": _PRIORITY_MAP[severity],
            "SYSLOG_IDENTIFIER": self._subsystem,
            "SUBSYSTEM": self._subsystem,
            "CATEGORY": self._category,
            "LOGGER_LEVEL": event.level.name,
        }
        if self._verbose_metadata and event.has_metadata:
            message = f"{message}{event.call_site_suffix()}"
            fields["CODE_FUNC"] = event.function
            fields["CODE_FILE"] = event.file
            fields["CODE_LINE"] = event.line
        fields["MESSAGE"] = message
        return fields


__all__ = ["NativeSeverity", "PlatformLogBackend", "journald_available", "native_severity"]
