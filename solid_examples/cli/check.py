"""Check command: detect SOLID violations in Python source.

With no paths, checks the bundled examples, where every bad example should
be flagged for its own principle and every good example should be clean.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from solid_examples.analysis import SOLIDChecker
from solid_examples.catalog import list_examples
from solid_examples.cli.common import get_config_or_default, get_console
from solid_examples.cli.display import build_findings_table, format_report_summary
from solid_examples.cli.ux import EXIT_FINDINGS, exit_with_error
from solid_examples.config import ConfigError


def default_targets() -> list[Path]:
    """Source files of the bundled examples."""
    return [example.source_path for example in list_examples()]


def check_command(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Files or directories to check (default: the bundled examples)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON instead of a table",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 3 when violations are found",
    ),
) -> None:
    """
    Detect SOLID violations using static analysis.

    Examples:
        # Check the bundled examples
        solid-examples check

        # Check your own package, failing CI on violations
        solid-examples check src/ --strict
    """
    try:
        config = get_config_or_default()
    except ConfigError as e:
        exit_with_error("INVALID_CONFIG", str(e))

    targets = list(paths) if paths else default_targets()
    missing = [str(path) for path in targets if not path.exists()]
    if missing:
        exit_with_error(
            "PATH_NOT_FOUND",
            f"Cannot check missing path(s): {', '.join(missing)}",
            hint="Pass existing .py files or directories",
        )

    report = SOLIDChecker(config.checker).analyze_paths(targets)

    console = get_console()
    if as_json:
        # Plain print keeps the JSON free of Rich markup and wrapping
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        if report.has_findings:
            root = Path.cwd() if paths else default_targets()[0].parents[2]
            console.print(build_findings_table(report, root=root))
        console.print(format_report_summary(report))

    if strict and report.has_findings:
        raise typer.Exit(EXIT_FINDINGS)
