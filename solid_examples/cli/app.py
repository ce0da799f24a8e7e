"""Main Typer app definition and routing.

This is the canonical entry point for the CLI. The app, callback, and
command registrations are all defined here.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from solid_examples import __version__
from solid_examples.cli.common import (
    configure_logging,
    get_config_or_default,
    get_console,
    set_config_path,
)
from solid_examples.cli.ux import exit_with_error
from solid_examples.config import ConfigError

# Create Typer app
app = typer.Typer(
    name="solid-examples",
    help="Paired bad/good examples of the SOLID design principles",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        get_console().print(f"solid-examples version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: ./solid-examples.yaml if present)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    SOLID Examples - learn the SOLID principles from paired bad/good code.

    Use `examples list` to see what is available, `examples run <principle>`
    to compare a pair, and `check` to look for violations in any code.
    """
    if config:
        if not Path(config).is_file():
            exit_with_error(
                "CONFIG_NOT_FOUND",
                f"Config file not found: {config}",
                hint="Check the --config path",
            )
        set_config_path(str(Path(config).absolute()))
    else:
        set_config_path(None)

    if verbose:
        configure_logging("DEBUG")
    else:
        try:
            configure_logging(get_config_or_default().log_level)
        except ConfigError as e:
            exit_with_error("INVALID_CONFIG", str(e), hint="Fix the file or drop --config")

    # If no subcommand and no --help, show help
    if ctx.invoked_subcommand is None:
        get_console().print(ctx.get_help())
        raise typer.Exit(0)


# =========================================================================
# Command Registration
# =========================================================================

# Import and register example commands
from solid_examples.cli.examples import app as examples_app  # noqa: E402

app.add_typer(examples_app, name="examples")

# Import and register the checker
from solid_examples.cli.check import check_command  # noqa: E402

app.command("check")(check_command)


# =========================================================================
# Entry Point
# =========================================================================


def cli_main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "cli_main"]
