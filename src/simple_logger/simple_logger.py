"""Composition root: factories that wire backends into a :class:`Logger`.

Purpose
-------
Translate keyword arguments and the environment kill switch into ready-to-use
loggers. This is the only place that reads the environment on behalf of
backends, so every backend receives a plain ``enabled`` flag.

Contents
--------
* Factories: :func:`default`, :func:`console`, :func:`platform_log`, :func:`mock`.
* Diagnostics: :func:`summary_info`, :func:`logdemo`.

System Role
-----------
Bridges the domain and application layers with the concrete adapters. No
module-level logger state exists; every call returns fresh instances owned by
the caller.
"""

from __future__ import annotations

from typing import Any, Callable

from .adapters import CaptureBackend, ConsoleBackend, PlatformLogBackend, journald_available
from .application.facade import Logger
from .application.ports import LoggerBackendPort, NativeSender
from .config import DEFAULT_ENVIRONMENT_KEY, logger_enabled
from .domain import ConsoleVerbosity, LogLevel

DEMO_BACKENDS = ("console", "platform", "capture")


def default(subsystem: str, category: str, *, environment_key: str = DEFAULT_ENVIRONMENT_KEY) -> Logger:
    """Return a logger using the native facility when available.

    Falls back to a ``STANDARD`` console logger on stdout when journald cannot
    be reached (non-Linux hosts or ``systemd-python`` missing).
    """

    if journald_available():
        return platform_log(subsystem, category, environment_key=environment_key)
    return console(
        subsystem=subsystem,
        category=category,
        verbosity=ConsoleVerbosity.STANDARD,
        use_stderr=False,
        environment_key=environment_key,
    )


def console(
    *,
    subsystem: str = "Console Logger",
    category: str = "",
    verbosity: ConsoleVerbosity | str = ConsoleVerbosity.DETAILED,
    use_stderr: bool = False,
    enable_colors: bool = True,
    environment_key: str = DEFAULT_ENVIRONMENT_KEY,
) -> Logger:
    """Return a logger writing to the console.

    Examples
    --------
    >>> logger = console(verbosity="minimal", enable_colors=False, environment_key="SIMPLE_LOGGER_DOC_UNSET")
    >>> logger.backend.verbosity
    <ConsoleVerbosity.MINIMAL: 1>
    """

    tier = verbosity if isinstance(verbosity, ConsoleVerbosity) else ConsoleVerbosity.from_name(verbosity)
    backend = ConsoleBackend(
        subsystem=subsystem,
        category=category,
        verbosity=tier,
        use_stderr=use_stderr,
        enable_colors=enable_colors,
        enabled=logger_enabled(environment_key),
    )
    return Logger(backend)


def platform_log(
    subsystem: str,
    category: str,
    *,
    enhanced_warnings: bool = False,
    verbose_metadata: bool = __debug__,
    environment_key: str = DEFAULT_ENVIRONMENT_KEY,
    sender: NativeSender | None = None,
) -> Logger:
    """Return a logger writing to the native log facility.

    Raises
    ------
    ValueError
        If ``subsystem`` or ``category`` is blank.
    """

    backend = PlatformLogBackend(
        subsystem=subsystem,
        category=category,
        enhanced_warnings=enhanced_warnings,
        verbose_metadata=verbose_metadata,
        enabled=logger_enabled(environment_key),
        sender=sender,
    )
    return Logger(backend)


def mock() -> CaptureBackend:
    """Return a fresh capture backend for tests.

    Examples
    --------
    >>> capture = mock()
    >>> capture.warning("disk almost full")
    >>> capture.has_warning_logs
    True
    """

    return CaptureBackend()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def logdemo(
    *,
    backend: str = "console",
    subsystem: str = "logdemo",
    category: str = "demo",
    verbosity: ConsoleVerbosity | str = ConsoleVerbosity.DETAILED,
    use_stderr: bool = False,
    enable_colors: bool = True,
    enhanced_warnings: bool = False,
    environment_key: str = DEFAULT_ENVIRONMENT_KEY,
) -> dict[str, Any]:
    """Emit one sample event per level through the selected backend.

    Returns
    -------
    dict[str, Any]
        ``backend`` name, ``enabled`` flag, the emitted ``events`` as
        ``(severity, message)`` pairs and, for the capture backend, the
        ``captured`` entries.

    Raises
    ------
    ValueError
        When ``backend`` or ``verbosity`` is unknown, or the platform backend
        receives a blank subsystem/category.

    Examples
    --------
    >>> result = logdemo(backend="capture")
    >>> [severity for severity, _ in result["captured"]]
    ['debug', 'info', 'warning', 'error']
    """

    key = backend.strip().lower()
    if key not in DEMO_BACKENDS:
        raise ValueError(f"Unknown demo backend: {backend!r}")

    capture: CaptureBackend | None = None
    target: LoggerBackendPort
    if key == "console":
        target = console(
            subsystem=subsystem,
            category=category,
            verbosity=verbosity,
            use_stderr=use_stderr,
            enable_colors=enable_colors,
            environment_key=environment_key,
        ).backend
    elif key == "platform":
        target = platform_log(subsystem, category, enhanced_warnings=enhanced_warnings, environment_key=environment_key).backend
    else:
        capture = mock()
        target = capture

    logger = Logger(target)
    samples = [
        (LogLevel.DEBUG, "Debug message"),
        (LogLevel.INFO, "Information message"),
        (LogLevel.WARNING, "Warning message"),
        (LogLevel.ERROR, "Error message"),
    ]
    emitters: dict[LogLevel, Callable[[str], None]] = {
        LogLevel.DEBUG: logger.debug,
        LogLevel.INFO: logger.info,
        LogLevel.WARNING: logger.warning,
        LogLevel.ERROR: logger.error,
    }
    for level, message in samples:
        emitters[level](message)

    result: dict[str, Any] = {
        "backend": key,
        "enabled": getattr(target, "enabled", True),
        "events": [(level.severity, message) for level, message in samples],
    }
    if capture is not None:
        result["captured"] = [(entry.level.severity, entry.message) for entry in capture.log_calls]
    return result


__all__ = [
    "console",
    "default",
    "logdemo",
    "mock",
    "platform_log",
    "summary_info",
]
