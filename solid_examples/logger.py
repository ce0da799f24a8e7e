"""
Structured JSONL run logging for SOLID Examples.

This module provides:
- JSONL event logging of example runs
- Log files organized by date
- Log levels (debug, info, warn, error)
- Context manager for run-scoped logging
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator, Optional
from uuid import uuid4

from solid_examples.config import ExamplesConfig

if TYPE_CHECKING:
    from solid_examples.catalog import Example

logger = logging.getLogger(__name__)


class LogLevel:
    """Log level constants."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class RunLogger:
    """
    JSONL event logger for example runs.

    Writes structured log entries to <logs_dir>/runs-YYYY-MM-DD.jsonl

    Each log entry is a JSON object with:
    - timestamp: ISO format timestamp
    - level: Log level (debug, info, warn, error)
    - event_type: Type of event being logged
    - data: Additional event data (dict)
    - run_id: Present while inside run_context()
    """

    def __init__(self, config: Optional[ExamplesConfig] = None) -> None:
        self.config = config or ExamplesConfig()
        self._current_run_id: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self.config.run_log.enabled

    def _get_log_path(self) -> Path:
        """Get the log file path for today."""
        today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        return self.config.logs_path / f"runs-{today}.jsonl"

    def _write_entry(self, entry: dict[str, Any]) -> None:
        log_path = self._get_log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        with open(log_path, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")

    def log(
        self,
        event_type: str,
        data: Optional[dict[str, Any]] = None,
        level: str = LogLevel.INFO,
    ) -> None:
        """
        Log an event. Does nothing when the run log is disabled.

        Args:
            event_type: Type of event (e.g., "run_start", "run_end").
            data: Additional data to include in the log entry.
            level: Log level (debug, info, warn, error).
        """
        if not self.enabled:
            return

        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "event_type": event_type,
            "data": data or {},
        }
        if self._current_run_id:
            entry["run_id"] = self._current_run_id

        self._write_entry(entry)

    def debug(self, event_type: str, data: Optional[dict[str, Any]] = None) -> None:
        self.log(event_type, data, LogLevel.DEBUG)

    def info(self, event_type: str, data: Optional[dict[str, Any]] = None) -> None:
        self.log(event_type, data, LogLevel.INFO)

    def warn(self, event_type: str, data: Optional[dict[str, Any]] = None) -> None:
        self.log(event_type, data, LogLevel.WARN)

    def error(self, event_type: str, data: Optional[dict[str, Any]] = None) -> None:
        self.log(event_type, data, LogLevel.ERROR)

    @contextmanager
    def run_context(self, example: "Example") -> Iterator[RunLogger]:
        """
        Context manager wrapping a single example run.

        Logs run_start on entry and run_end (with duration) on exit. If the
        body raises, run_error is logged and the exception propagates.

        Example:
            with run_logger.run_context(example):
                example.run()
        """
        old_run_id = self._current_run_id
        self._current_run_id = f"run_{uuid4().hex[:12]}"
        details = {"principle": example.principle.value, "variant": example.variant.value}
        logger.debug("Starting %s/%s", details["principle"], details["variant"])
        self.info("run_start", dict(details, module=example.module))
        started = time.monotonic()
        try:
            yield self
        except Exception as exc:
            self.error("run_error", dict(details, error=str(exc), error_type=type(exc).__name__))
            raise
        else:
            elapsed_ms = round((time.monotonic() - started) * 1000, 3)
            self.info("run_end", dict(details, duration_ms=elapsed_ms))
        finally:
            self._current_run_id = old_run_id

    def read_entries(self) -> list[dict[str, Any]]:
        """Read today's log entries (empty if nothing was written)."""
        log_path = self._get_log_path()
        if not log_path.exists():
            return []
        with open(log_path, "r") as f:
            return [json.loads(line) for line in f if line.strip()]
