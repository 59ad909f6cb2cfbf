from __future__ import annotations

from datetime import datetime

import pytest

from simple_logger.adapters.capture import CaptureBackend
from simple_logger.adapters.console.console_backend import ConsoleBackend
from simple_logger.adapters.structured.platform_log import PlatformLogBackend
from simple_logger.application.facade import Logger
from simple_logger.application.ports import ClockPort, LoggerBackendPort, NativeSender
from tests.conftest import FixedClock, RecordingBackend, RecordingSender


@pytest.mark.parametrize(
    "factory",
    [
        lambda: ConsoleBackend(enabled=False),
        lambda: PlatformLogBackend(subsystem="app", category="net", sender=RecordingSender()),
        lambda: CaptureBackend(),
        lambda: Logger(CaptureBackend()),
        lambda: RecordingBackend(),
    ],
)
def test_backends_satisfy_the_backend_port(factory) -> None:  # noqa: ANN001
    assert isinstance(factory(), LoggerBackendPort)


def test_clock_and_sender_contracts() -> None:
    clock: ClockPort = FixedClock()
    sender: NativeSender = RecordingSender()

    assert isinstance(clock, ClockPort)
    assert isinstance(sender, NativeSender)
    assert isinstance(clock.now(), datetime)

    sender(MESSAGE="hi")
    assert sender.records == [{"MESSAGE": "hi"}]  # type: ignore[attr-defined]


def test_objects_without_log_are_not_backends() -> None:
    assert not isinstance(object(), LoggerBackendPort)
