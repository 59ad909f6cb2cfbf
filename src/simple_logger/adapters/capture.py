"""In-memory capture backend for test assertions.

Purpose
-------
Record every event so tests can assert on what was logged, including from
concurrent threads and asyncio tasks.

Contents
--------
* :class:`CaptureBackend` - lock-guarded ordered store with inspection helpers
  and polling waits.

System Role
-----------
Drop-in replacement for the console or platform backend in tests. Every
operation takes the same :class:`threading.Lock` for the shortest possible
section; readers see full snapshots, never a half-appended entry.
"""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Callable, Mapping, Sequence

from simple_logger.application.facade import LoggerFacade
from simple_logger.domain.events import CapturedLog
from simple_logger.domain.levels import LogLevel

DEFAULT_POLL_INTERVAL = 0.01


class CaptureBackend(LoggerFacade):
    """Capture log calls in memory.

    Only level and message are stored; metadata is accepted and discarded.
    Appends from one thread keep their order; the order across threads is
    whatever order the lock was acquired in.

    Examples
    --------
    >>> capture = CaptureBackend()
    >>> capture.info("User logged in")
    >>> capture.error("Database down")
    >>> capture.total_log_count
    2
    >>> capture.has_log(LogLevel.INFO, containing="logged in")
    True
    >>> capture.verify_log_sequence([LogLevel.INFO, LogLevel.ERROR])
    True
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._log_calls: list[CapturedLog] = []

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        """Append ``(level, message)`` to the store."""
        entry = CapturedLog(level, message)
        with self._lock:
            self._log_calls.append(entry)

    def clear_logs(self) -> None:
        """Remove every captured entry."""
        with self._lock:
            self._log_calls.clear()

    @property
    def log_calls(self) -> list[CapturedLog]:
        """Return a snapshot of all captured entries, oldest first."""
        with self._lock:
            return list(self._log_calls)

    @property
    def total_log_count(self) -> int:
        with self._lock:
            return len(self._log_calls)

    @property
    def all_log_messages(self) -> list[str]:
        """Return every captured message regardless of level."""
        with self._lock:
            return [entry.message for entry in self._log_calls]

    def log_count(self, level: LogLevel) -> int:
        """Return the number of entries captured at ``level``."""
        with self._lock:
            return sum(1 for entry in self._log_calls if entry.level is level)

    def has_logs(self, level: LogLevel) -> bool:
        with self._lock:
            return any(entry.level is level for entry in self._log_calls)

    @property
    def has_debug_logs(self) -> bool:
        return self.has_logs(LogLevel.DEBUG)

    @property
    def has_info_logs(self) -> bool:
        return self.has_logs(LogLevel.INFO)

    @property
    def has_warning_logs(self) -> bool:
        return self.has_logs(LogLevel.WARNING)

    @property
    def has_error_logs(self) -> bool:
        return self.has_logs(LogLevel.ERROR)

    def has_log(self, level: LogLevel, containing: str) -> bool:
        """Return ``True`` if an entry at ``level`` contains ``containing``."""
        with self._lock:
            return any(entry.level is level and containing in entry.message for entry in self._log_calls)

    def has_log_matching(self, level: LogLevel, predicate: Callable[[str], bool]) -> bool:
        """Return ``True`` if an entry at ``level`` satisfies ``predicate``.

        ``predicate`` runs while the store lock is held; it must not log to
        this backend.
        """
        with self._lock:
            return any(entry.level is level and predicate(entry.message) for entry in self._log_calls)

    def get_log_messages(self, level: LogLevel) -> list[str]:
        """Return messages captured at ``level`` in capture order."""
        with self._lock:
            return [entry.message for entry in self._log_calls if entry.level is level]

    def get_last_log(self) -> CapturedLog | None:
        """Return the most recent entry or ``None`` when the store is empty."""
        with self._lock:
            return self._log_calls[-1] if self._log_calls else None

    def verify_log_sequence(self, expected_levels: Sequence[LogLevel]) -> bool:
        """Return ``True`` if the captured levels equal ``expected_levels`` exactly."""
        expected = list(expected_levels)
        with self._lock:
            return [entry.level for entry in self._log_calls] == expected

    def verify_last_logs(self, expected_levels: Sequence[LogLevel]) -> bool:
        """Return ``True`` if the most recent levels equal ``expected_levels``.

        An empty expectation always matches; an expectation longer than the
        store never does.
        """
        expected = list(expected_levels)
        if not expected:
            return True
        with self._lock:
            if len(self._log_calls) < len(expected):
                return False
            return [entry.level for entry in self._log_calls[-len(expected) :]] == expected

    async def wait_for_log(
        self,
        level: LogLevel,
        containing: str,
        timeout: float = 1.0,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
    ) -> bool:
        """Poll until an entry at ``level`` contains ``containing``.

        Returns ``False`` once ``timeout`` seconds have elapsed without a match.
        The lock is released between polls so other tasks and threads can keep
        appending.
        """
        deadline = time.monotonic() + timeout
        while True:
            if self.has_log(level, containing):
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            await asyncio.sleep(min(interval, remaining))

    def wait_for_log_sync(
        self,
        level: LogLevel,
        containing: str,
        timeout: float = 1.0,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
    ) -> bool:
        """Blocking counterpart of :meth:`wait_for_log` for thread-based callers."""
        deadline = time.monotonic() + timeout
        while True:
            if self.has_log(level, containing):
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(interval, remaining))


__all__ = ["CaptureBackend", "DEFAULT_POLL_INTERVAL"]
