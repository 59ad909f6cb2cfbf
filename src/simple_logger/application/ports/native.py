"""Port for the operating-system log transport used by the platform backend."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NativeSender(Protocol):
    """Deliver one record of upper-case fields to the native log facility."""

    def __call__(self, **fields: Any) -> None: ...


__all__ = ["NativeSender"]
