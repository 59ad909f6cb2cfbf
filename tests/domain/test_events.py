from __future__ import annotations

import dataclasses

import pytest

from simple_logger.domain.events import CapturedLog, LogEvent
from simple_logger.domain.levels import LogLevel


def test_create_copies_metadata_as_strings() -> None:
    source = {"function": "connect", "file": "net.go", "line": 42}
    event = LogEvent.create(LogLevel.ERROR, "conn failed", source)  # type: ignore[arg-type]
    source["function"] = "changed"

    assert event.function == "connect"
    assert event.file == "net.go"
    assert event.line == "42"
    assert event.has_metadata is True


def test_create_without_metadata_defaults_to_empty_strings() -> None:
    event = LogEvent.create(LogLevel.INFO, "ready")

    assert event.has_metadata is False
    assert dict(event.metadata) == {}
    assert event.call_site_suffix() == " in  at :"


def test_metadata_is_read_only() -> None:
    event = LogEvent.create(LogLevel.INFO, "ready", {"line": "1"})

    with pytest.raises(TypeError):
        event.metadata["line"] = "2"  # type: ignore[index]


def test_event_is_frozen() -> None:
    event = LogEvent.create(LogLevel.INFO, "ready")

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "other"  # type: ignore[misc]


def test_call_site_suffix_formats_function_file_line() -> None:
    event = LogEvent.create(LogLevel.DEBUG, "x", {"function": "load", "file": "cfg.py", "line": "9"})

    assert event.call_site_suffix() == " in load at cfg.py:9"


def test_captured_log_unpacks_like_a_pair() -> None:
    level, message = CapturedLog(LogLevel.WARNING, "slow")

    assert level is LogLevel.WARNING
    assert message == "slow"
