"""Module entry point for ``python -m simple_logger``.

Contents
--------
* :func:`main` - run the Click group in a test-friendly manner.
"""

from __future__ import annotations

from typing import Sequence

import click

from .cli import cli


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code instead of exiting.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_request:
        return exit_request.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
