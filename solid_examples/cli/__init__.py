"""CLI package for solid-examples.

Modules:
    app.py      - Main Typer app, version callback, command registration
    examples.py - Example commands (list, run, tour)
    check.py    - SOLID violation checker command
    display.py  - Rich formatting utilities (format_principle, build_findings_table, etc.)
    common.py   - Shared helpers (get_console, config path, logging setup)
    ux.py       - Error formatting and exit codes

Command Structure:
    solid-examples examples list
    solid-examples examples run ocp bad
    solid-examples check src/ --strict

Usage:
    from solid_examples.cli import app, cli_main  # Main exports
"""
from solid_examples.cli.app import app, cli_main

__all__ = ["app", "cli_main"]
