"""Tests for the JSONL run logger."""

import pytest

from solid_examples.catalog import get_example
from solid_examples.config import ExamplesConfig, RunLogConfig
from solid_examples.logger import LogLevel, RunLogger


@pytest.fixture
def enabled_logger(tmp_path):
    config = ExamplesConfig(
        repo_root=str(tmp_path),
        run_log=RunLogConfig(enabled=True, logs_dir="logs"),
    )
    return RunLogger(config)


class TestRunLogger:
    def test_disabled_by_default(self, tmp_path):
        run_logger = RunLogger(ExamplesConfig(repo_root=str(tmp_path)))
        run_logger.info("run_start", {"principle": "srp"})

        assert not run_logger.enabled
        assert run_logger.read_entries() == []
        assert not (tmp_path / ".solid-examples").exists()

    def test_writes_daily_jsonl_file(self, enabled_logger, tmp_path):
        enabled_logger.warn("slow_example", {"principle": "ocp"})

        files = list((tmp_path / "logs").glob("runs-*.jsonl"))
        assert len(files) == 1
        assert files[0].name.startswith("runs-20")

        [entry] = enabled_logger.read_entries()
        assert entry["level"] == LogLevel.WARN
        assert entry["event_type"] == "slow_example"
        assert entry["data"] == {"principle": "ocp"}
        assert entry["timestamp"].endswith("Z")
        assert "run_id" not in entry

    def test_level_helpers(self, enabled_logger):
        enabled_logger.debug("a")
        enabled_logger.info("b")
        enabled_logger.error("c")

        levels = [entry["level"] for entry in enabled_logger.read_entries()]
        assert levels == ["debug", "info", "error"]


class TestRunContext:
    def test_logs_start_and_end(self, enabled_logger):
        example = get_example("ocp", "good")
        with enabled_logger.run_context(example):
            example.run()

        start, end = enabled_logger.read_entries()
        assert start["event_type"] == "run_start"
        assert start["data"] == {
            "principle": "ocp",
            "variant": "good",
            "module": "solid_examples.open_closed.good",
        }
        assert end["event_type"] == "run_end"
        assert end["data"]["duration_ms"] >= 0
        assert start["run_id"] == end["run_id"]
        assert start["run_id"].startswith("run_")

    def test_logs_error_and_reraises(self, enabled_logger):
        example = get_example("lsp", "bad")
        with pytest.raises(RuntimeError):
            with enabled_logger.run_context(example):
                raise RuntimeError("boom")

        start, failure = enabled_logger.read_entries()
        assert failure["event_type"] == "run_error"
        assert failure["level"] == "error"
        assert failure["data"]["error"] == "boom"
        assert failure["data"]["error_type"] == "RuntimeError"

    def test_run_id_scoped_to_context(self, enabled_logger):
        example = get_example("srp", "bad")
        with enabled_logger.run_context(example):
            pass
        enabled_logger.info("after")

        entries = enabled_logger.read_entries()
        assert len({entries[0]["run_id"], entries[1]["run_id"]}) == 1
        assert "run_id" not in entries[2]

    def test_separate_runs_get_separate_ids(self, enabled_logger):
        example = get_example("isp", "good")
        for _ in range(2):
            with enabled_logger.run_context(example):
                pass

        run_ids = {entry["run_id"] for entry in enabled_logger.read_entries()}
        assert len(run_ids) == 2
