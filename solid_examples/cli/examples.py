"""Example commands: list, run and tour the bundled bad/good pairs.

Commands:
- examples list: Show the catalog
- examples run PRINCIPLE [VARIANT]: Run one example, or a bad/good pair
- examples tour: Run every pair in SOLID order
"""
from __future__ import annotations

import logging
from typing import Optional

import typer

from solid_examples.catalog import (
    Example,
    Principle,
    get_example,
    get_pair,
    list_examples,
)
from solid_examples.cli.common import get_config_or_default, get_console
from solid_examples.cli.display import build_example_header, build_examples_table
from solid_examples.cli.ux import EXIT_SYSTEM_ERROR, EXIT_USER_ERROR, exit_with_error
from solid_examples.config import ConfigError
from solid_examples.errors import UnknownExampleError
from solid_examples.logger import RunLogger

logger = logging.getLogger(__name__)

# Create examples command group
app = typer.Typer(
    name="examples",
    help="List and run the bad/good example pairs",
    no_args_is_help=True,
)

VALID_VARIANTS = ["bad", "good", "both"]


def _load_config():
    try:
        return get_config_or_default()
    except ConfigError as e:
        exit_with_error("INVALID_CONFIG", str(e), hint="Fix the file or drop --config")


def _run_examples(examples: list[Example], run_logger: RunLogger) -> None:
    """Run examples in order, each under its own header and run log context."""
    console = get_console()
    for example in examples:
        console.print()
        console.print(build_example_header(example))
        try:
            with run_logger.run_context(example):
                example.run()
        except Exception as e:
            logger.exception("Example %s failed", example.key)
            exit_with_error(
                "EXAMPLE_FAILED",
                f"{example.key} raised {type(e).__name__}: {e}",
                exit_code=EXIT_SYSTEM_ERROR,
            )


@app.command("list")
def list_command(
    principle: Optional[Principle] = typer.Option(
        None,
        "--principle",
        "-p",
        help="Only show one principle (srp, ocp, lsp, isp, dip)",
    ),
) -> None:
    """Show the catalog of examples."""
    get_console().print(build_examples_table(list_examples(principle)))


@app.command("run")
def run_command(
    principle: str = typer.Argument(..., help="Principle code: srp, ocp, lsp, isp or dip"),
    variant: Optional[str] = typer.Argument(
        None,
        help="bad, good or both (default: the configured default_variant)",
    ),
) -> None:
    """
    Run one example, or the bad and good examples of a principle back to back.

    Examples:
        solid-examples examples run ocp bad
        solid-examples examples run dip
    """
    config = _load_config()
    chosen = (variant or config.default_variant).lower()

    if chosen not in VALID_VARIANTS:
        exit_with_error(
            "INVALID_VARIANT",
            f"Unknown variant '{variant}'",
            expected=", ".join(VALID_VARIANTS),
            got=variant,
        )

    try:
        if chosen == "both":
            examples = list(get_pair(principle))
        else:
            examples = [get_example(principle, chosen)]
    except UnknownExampleError as e:
        exit_with_error(
            "UNKNOWN_EXAMPLE",
            str(e),
            expected=", ".join(p.value for p in Principle),
            got=principle,
            exit_code=EXIT_USER_ERROR,
        )

    _run_examples(examples, RunLogger(config))


@app.command("tour")
def tour_command(
    only_good: bool = typer.Option(
        False,
        "--only-good",
        help="Skip the bad examples",
    ),
) -> None:
    """Run every bad/good pair in SOLID order."""
    config = _load_config()
    examples = list_examples()
    if only_good:
        examples = [example for example in examples if example.variant.value == "good"]

    _run_examples(examples, RunLogger(config))
    get_console().print(f"\n[green]Tour complete:[/green] {len(examples)} example(s) run.")
