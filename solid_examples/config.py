"""
Configuration loading and validation for SOLID Examples.

This module handles:
- Loading solid-examples.yaml from the working directory
- Environment variable resolution (${VAR} syntax)
- Validation of field values
- Default values for optional fields
- Caching of the loaded configuration
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_CONFIG_FILE = "solid-examples.yaml"

VALID_VARIANTS = ("bad", "good", "both")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""
    pass


@dataclass
class RunLogConfig:
    """JSONL run log configuration."""
    enabled: bool = False                      # Write a JSONL event per example run
    logs_dir: str = ".solid-examples/logs"     # Relative to repo_root


@dataclass
class CheckerConfig:
    """Thresholds for the SOLID checker."""
    cluster_threshold: int = 2                 # More clusters than this flags SRP
    min_cluster_size: int = 2                  # Methods needed to count a cluster
    min_chain_branches: int = 2                # if/elif branches needed to flag OCP
    allowed_instantiations: list[str] = field(default_factory=list)  # Extra classes DIP ignores

    def validate(self) -> None:
        if self.cluster_threshold < 1:
            raise ConfigError("checker.cluster_threshold must be >= 1")
        if self.min_cluster_size < 1:
            raise ConfigError("checker.min_cluster_size must be >= 1")
        if self.min_chain_branches < 2:
            raise ConfigError("checker.min_chain_branches must be >= 2")


@dataclass
class ExamplesConfig:
    """
    Main configuration for SOLID Examples.

    This is the top-level config loaded from solid-examples.yaml.
    """
    default_variant: str = "both"
    log_level: str = "WARNING"
    repo_root: str = "."
    run_log: RunLogConfig = field(default_factory=RunLogConfig)
    checker: CheckerConfig = field(default_factory=CheckerConfig)

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        self.validate()

    def validate(self) -> None:
        if self.default_variant not in VALID_VARIANTS:
            raise ConfigError(
                f"default_variant must be one of {', '.join(VALID_VARIANTS)}, "
                f"got '{self.default_variant}'"
            )
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(f"log_level '{self.log_level}' is not a logging level")
        self.checker.validate()

    @property
    def logs_path(self) -> Path:
        """Path to the run log directory."""
        return Path(self.repo_root) / self.run_log.logs_dir


# Module-level cache for loaded config
_config_cache: Optional[ExamplesConfig] = None


def _resolve_env_vars(value: Any) -> Any:
    """
    Recursively resolve ${VAR} references in strings.

    Unset variables resolve to an empty string.
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace(match: re.Match) -> str:
            return os.environ.get(match.group(1), "")

        return pattern.sub(replace, value)
    if isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    return value


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false", "1", "0", "yes", "no"):
        return value.lower() in ("true", "1", "yes")
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _as_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _parse_run_log_config(data: dict[str, Any]) -> RunLogConfig:
    """Parse run_log configuration section."""
    return RunLogConfig(
        enabled=_as_bool(data.get("enabled", False), "run_log.enabled"),
        logs_dir=str(data.get("logs_dir", ".solid-examples/logs")),
    )


def _parse_checker_config(data: dict[str, Any]) -> CheckerConfig:
    """Parse checker configuration section."""
    allowed = data.get("allowed_instantiations", []) or []
    if not isinstance(allowed, list):
        raise ConfigError("checker.allowed_instantiations must be a list")
    return CheckerConfig(
        cluster_threshold=_as_int(data.get("cluster_threshold", 2), "checker.cluster_threshold"),
        min_cluster_size=_as_int(data.get("min_cluster_size", 2), "checker.min_cluster_size"),
        min_chain_branches=_as_int(data.get("min_chain_branches", 2), "checker.min_chain_branches"),
        allowed_instantiations=[str(name) for name in allowed],
    )


def load_config(config_path: Optional[str] = None) -> ExamplesConfig:
    """
    Load configuration from solid-examples.yaml.

    Args:
        config_path: Optional path to config file. If not provided,
                     looks for solid-examples.yaml in current directory.

    Returns:
        ExamplesConfig: Loaded and validated configuration.

    Raises:
        ConfigError: If config is invalid or cannot be loaded.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(path, "r") as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")

    if not raw_data:
        raise ConfigError("Configuration file is empty")
    if not isinstance(raw_data, dict):
        raise ConfigError("Configuration file must contain a mapping")

    data = _resolve_env_vars(raw_data)

    for section in ("run_log", "checker"):
        if not isinstance(data.get(section, {}) or {}, dict):
            raise ConfigError(f"Section '{section}' must be a mapping")

    return ExamplesConfig(
        default_variant=str(data.get("default_variant", "both")),
        log_level=str(data.get("log_level", "WARNING")),
        repo_root=str(data.get("repo_root", ".")),
        run_log=_parse_run_log_config(data.get("run_log") or {}),
        checker=_parse_checker_config(data.get("checker") or {}),
    )


def get_config(config_path: Optional[str] = None, force_reload: bool = False) -> ExamplesConfig:
    """
    Get the cached configuration, loading it if needed.

    Args:
        config_path: Optional path to config file.
        force_reload: If True, reload config even if cached.

    Returns:
        ExamplesConfig: The configuration.
    """
    global _config_cache

    if _config_cache is None or force_reload:
        _config_cache = load_config(config_path)

    return _config_cache


def clear_config_cache() -> None:
    """Clear the cached configuration (useful for testing)."""
    global _config_cache
    _config_cache = None
