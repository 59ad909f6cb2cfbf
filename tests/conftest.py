from __future__ import annotations

import io
from datetime import datetime
from typing import Any, Callable, Mapping

import pytest

from simple_logger.config import DEFAULT_ENVIRONMENT_KEY
from simple_logger.domain.events import LogEvent
from simple_logger.domain.levels import LogLevel

FIXED_MOMENT = datetime(2025, 9, 23, 12, 30, 45)


class FixedClock:
    def __init__(self, moment: datetime = FIXED_MOMENT) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class RecordingSender:
    """Stand-in for ``systemd.journal.send`` collecting every field set."""

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def __call__(self, **fields: Any) -> None:
        self.records.append(fields)


class RecordingBackend:
    """Minimal backend satisfying the port by recording raw calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[LogLevel, str, Mapping[str, str] | None]] = []

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, str] | None = None) -> None:
        self.calls.append((level, message, metadata))


@pytest.fixture(autouse=True)
def _clear_kill_switch(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DEFAULT_ENVIRONMENT_KEY, raising=False)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def text_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def event_factory() -> Callable[..., LogEvent]:
    def _factory(
        level: LogLevel = LogLevel.INFO,
        message: str = "hello",
        metadata: Mapping[str, str] | None = None,
    ) -> LogEvent:
        return LogEvent.create(level, message, metadata)

    return _factory
