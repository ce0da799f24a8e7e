"""Shared Rich console used by the examples and the CLI."""
from __future__ import annotations

from typing import Optional

from rich.console import Console

_console: Optional[Console] = None


def get_console() -> Console:
    """Get or create the console singleton."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Optional[Console]) -> None:
    """Replace the console singleton (None resets to a fresh default)."""
    global _console
    _console = console
