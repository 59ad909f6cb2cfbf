"""Click command group exposing the metadata banner and the backend demo.

Contents
--------
* :func:`cli` - root group; prints the banner when no subcommand is given.
* :func:`info` - print the banner.
* :func:`logdemo_command` - emit one event per level through a chosen backend.
"""

from __future__ import annotations

import click

from . import __init__conf__
from . import config as log_config
from .config import DEFAULT_ENVIRONMENT_KEY
from .domain import ConsoleVerbosity
from .simple_logger import DEMO_BACKENDS, logdemo, summary_info

_VERBOSITY_CHOICES = [tier.name.lower() for tier in ConsoleVerbosity]


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Pluggable logging facade utilities."""

    if log_config.use_dotenv_requested(use_dotenv):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo")
@click.option("--backend", type=click.Choice(DEMO_BACKENDS), default="console", show_default=True)
@click.option("--verbosity", type=click.Choice(_VERBOSITY_CHOICES), default="detailed", show_default=True)
@click.option("--subsystem", default="logdemo", show_default=True)
@click.option("--category", default="demo", show_default=True)
@click.option("--stderr", "use_stderr", is_flag=True, help="Write console output to stderr.")
@click.option("--no-color", "no_color", is_flag=True, help="Disable ANSI colours.")
@click.option("--enhanced-warnings", is_flag=True, help="Map warnings to the native fault severity.")
@click.option("--environment-key", default=DEFAULT_ENVIRONMENT_KEY, show_default=True, help="Kill-switch variable name.")
def logdemo_command(
    backend: str,
    verbosity: str,
    subsystem: str,
    category: str,
    use_stderr: bool,
    no_color: bool,
    enhanced_warnings: bool,
    environment_key: str,
) -> None:
    """Emit one sample event per level through the selected backend."""

    try:
        result = logdemo(
            backend=backend,
            subsystem=subsystem,
            category=category,
            verbosity=verbosity,
            use_stderr=use_stderr,
            enable_colors=not no_color,
            enhanced_warnings=enhanced_warnings,
            environment_key=environment_key,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    if not result["enabled"]:
        click.echo(f"{backend} backend disabled via ${environment_key}", err=True)
    for severity, message in result.get("captured", []):
        click.echo(f"captured {severity}: {message}")


__all__ = ["cli", "info", "logdemo_command"]
