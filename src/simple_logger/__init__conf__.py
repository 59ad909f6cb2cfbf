"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "simple_logger"
title = "Pluggable logging facade with console, journald and capture backends"
version = "0.1.0"
shell_command = "simple_logger"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner, one line per call to ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for simple_logger:\\n'
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [("name", name), ("title", title), ("version", version), ("shell_command", shell_command)]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
