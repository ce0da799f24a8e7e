"""Display helpers and formatters for the CLI.

Contains Rich formatting utilities for principles, variants and findings.
This module should NOT import from examples/check modules to avoid circular imports.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from solid_examples.analysis.models import CheckReport, Severity
from solid_examples.catalog import Example, Principle, Variant

# Principle colors
PRINCIPLE_STYLE: dict[Principle, str] = {
    Principle.SRP: "cyan",
    Principle.OCP: "blue",
    Principle.LSP: "magenta",
    Principle.ISP: "yellow",
    Principle.DIP: "green",
}

# Variant display names and colors
VARIANT_DISPLAY: dict[Variant, tuple[str, str]] = {
    Variant.BAD: ("Bad", "red"),
    Variant.GOOD: ("Good", "green"),
}

# Severity display names and colors
SEVERITY_DISPLAY: dict[Severity, tuple[str, str]] = {
    Severity.HIGH: ("HIGH", "red bold"),
    Severity.MEDIUM: ("MEDIUM", "yellow"),
    Severity.LOW: ("LOW", "dim"),
}


def format_principle(principle: Principle) -> Text:
    """Format a principle as colored '<CODE> Title' text."""
    style = PRINCIPLE_STYLE.get(principle, "white")
    return Text(f"{principle.value.upper()} {principle.label}", style=style)


def format_variant(variant: Variant) -> Text:
    display_name, style = VARIANT_DISPLAY.get(variant, (variant.value, "white"))
    return Text(display_name, style=style)


def format_severity(severity: Severity) -> Text:
    display_name, style = SEVERITY_DISPLAY.get(severity, (severity.value, "white"))
    return Text(display_name, style=style)


def format_location(file: str, line: int, root: Optional[Path] = None) -> str:
    """Format file:line, relative to ``root`` when possible."""
    path = Path(file)
    if root is not None:
        try:
            path = path.relative_to(root)
        except ValueError:
            pass
    return f"{path}:{line}"


def build_examples_table(examples: list[Example]) -> Table:
    """Build the catalog table for `examples list`."""
    table = Table(title="SOLID Examples")
    table.add_column("Principle")
    table.add_column("Variant")
    table.add_column("Run with", style="dim")
    table.add_column("Summary")

    for example in examples:
        table.add_row(
            format_principle(example.principle),
            format_variant(example.variant),
            f"{example.principle.value} {example.variant.value}",
            example.summary,
        )

    return table


def build_example_header(example: Example) -> Panel:
    """Header panel printed before an example's own output."""
    title = Text.assemble(
        format_principle(example.principle),
        " - ",
        format_variant(example.variant),
    )
    return Panel(Text(example.summary), title=title, expand=False)


def build_findings_table(report: CheckReport, root: Optional[Path] = None) -> Table:
    """Build the findings table for `check`."""
    table = Table(title=f"SOLID Findings ({report.total_issues})")
    table.add_column("ID", style="dim")
    table.add_column("Principle")
    table.add_column("Severity")
    table.add_column("Location")
    table.add_column("Title")

    for finding in report.findings:
        table.add_row(
            finding.finding_id,
            format_principle(finding.principle),
            format_severity(finding.severity),
            format_location(finding.file, finding.line, root),
            finding.title,
        )

    return table


def format_report_summary(report: CheckReport) -> str:
    """One-line summary of a check run."""
    if not report.has_findings:
        return f"[green]No SOLID violations found in {len(report.files_analyzed)} file(s).[/green]"

    counts = ", ".join(
        f"{code.upper()}: {count}"
        for code, count in report.by_principle().items()
        if count
    )
    return (
        f"[yellow]{report.total_issues} violation(s) in "
        f"{len(report.files_analyzed)} file(s)[/yellow] ({counts})"
    )
