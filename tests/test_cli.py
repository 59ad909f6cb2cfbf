"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from simple_logger import __init__conf__
from simple_logger import cli as cli_mod
from simple_logger.__main__ import main
from simple_logger.simple_logger import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
STANDARD_LINE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \[(DEBUG|INFO|WARNING|ERROR)\] ")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, env: dict[str, str] | None = None):
    runner = CliRunner()
    return runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command, env=env)


def test_cli_without_subcommand_prints_summary() -> None:
    result = run_cli()

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = run_cli(["info"])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_flag() -> None:
    result = run_cli(["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_logdemo_capture_lists_entries() -> None:
    result = run_cli(["logdemo", "--backend", "capture"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "captured debug: Debug message",
        "captured info: Information message",
        "captured warning: Warning message",
        "captured error: Error message",
    ]


def test_logdemo_console_standard_lines() -> None:
    result = run_cli(["logdemo", "--verbosity", "standard", "--no-color"])

    assert result.exit_code == 0
    lines = strip_ansi(result.output).splitlines()
    assert len(lines) == 4
    assert [STANDARD_LINE.match(line).group(1) for line in lines] == ["DEBUG", "INFO", "WARNING", "ERROR"]


def test_logdemo_console_detailed_mentions_subsystem() -> None:
    result = run_cli(["logdemo", "--subsystem", "svc", "--category", "db", "--no-color"])

    assert result.exit_code == 0
    assert re.search(r"svc\[db\] Error message in logdemo at simple_logger\.py:\d+", result.output)


def test_logdemo_reports_kill_switch() -> None:
    result = run_cli(["logdemo", "--verbosity", "minimal", "--environment-key", "DEMO_OFF"], env={"DEMO_OFF": "yes"})

    assert result.exit_code == 0
    assert "disabled via $DEMO_OFF" in result.output
    assert "Debug message" not in result.output


def test_logdemo_rejects_unknown_verbosity() -> None:
    result = run_cli(["logdemo", "--verbosity", "chatty"])

    assert result.exit_code != 0


def test_logdemo_platform_rejects_blank_category() -> None:
    result = run_cli(["logdemo", "--backend", "platform", "--category", " "])

    assert result.exit_code != 0
    assert "subsystem and category cannot be empty" in result.output


def test_main_returns_zero_for_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __init__conf__.version


def test_main_reports_usage_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["logdemo", "--backend", "nowhere"]) == 2
    assert "nowhere" in capsys.readouterr().err
