"""Shared fixtures: a recording console and clean CLI/config state."""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from solid_examples.cli.common import set_config_path
from solid_examples.config import clear_config_cache
from solid_examples.console import set_console


@pytest.fixture(autouse=True)
def console():
    """Recording console installed as the shared singleton.

    Wide and colorless so captured text is stable.
    """
    recording = Console(record=True, width=200, color_system=None)
    set_console(recording)
    yield recording
    set_console(None)


@pytest.fixture(autouse=True)
def reset_state():
    """Reset cached config and the --config override between tests."""
    clear_config_cache()
    set_config_path(None)
    yield
    clear_config_cache()
    set_config_path(None)


@pytest.fixture
def captured(console):
    """Return everything printed to the console so far."""
    def _captured() -> str:
        return console.export_text()
    return _captured


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test from an empty directory (no solid-examples.yaml)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
