"""Common utilities and global state for the CLI.

Contains config path management, config loading, and logging setup.
This module should NOT import from examples/check modules to avoid circular imports.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from solid_examples.config import (
    DEFAULT_CONFIG_FILE,
    ExamplesConfig,
    clear_config_cache,
    get_config,
)
from solid_examples.console import get_console

__all__ = [
    "configure_logging",
    "get_config_or_default",
    "get_config_path",
    "get_console",
    "load_config_safe",
    "set_config_path",
]

# ============================================================================
# Global State
# ============================================================================

# Global config file override (set via --config flag)
_config_path: Optional[str] = None

# Package log handler, attached on first configure_logging()
_log_handler: Optional[logging.Handler] = None


def get_config_path() -> Optional[str]:
    """Get the config file override if set."""
    return _config_path


def set_config_path(path: Optional[str]) -> None:
    """Set the config file override and drop any config cached for the old one."""
    global _config_path
    _config_path = path
    clear_config_cache()


# ============================================================================
# Config Helpers
# ============================================================================


def load_config_safe() -> Optional[ExamplesConfig]:
    """
    Load config, returning None if no config file exists.

    The file is parsed once per CLI run through the get_config() cache.
    A config file that exists but is invalid still raises ConfigError.
    """
    config_path = get_config_path()
    if config_path is None and not Path(DEFAULT_CONFIG_FILE).exists():
        return None
    return get_config(config_path)


def get_config_or_default() -> ExamplesConfig:
    """Get config or the built-in defaults."""
    config = load_config_safe()
    if config is not None:
        return config
    return ExamplesConfig()


def configure_logging(level: str) -> None:
    """Route package logging to stderr at ``level``.

    The handler is attached once; later calls only change the level.
    """
    global _log_handler
    package_logger = logging.getLogger("solid_examples")
    if _log_handler is None:
        _log_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
        )
        package_logger.addHandler(_log_handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
