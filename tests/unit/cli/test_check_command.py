"""Tests for `solid-examples check`."""

import json

import pytest

from solid_examples.cli import app
from solid_examples.cli.ux import EXIT_FINDINGS, EXIT_USER_ERROR

DIRTY_SOURCE = '''
class NotificationService:
    def __init__(self):
        self.sender = EmailSender()
'''


@pytest.fixture
def runner(cli_runner, in_tmp_dir):
    return cli_runner


class TestCheckBundledExamples:
    def test_reports_one_violation_per_principle(self, runner):
        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert "SOLID Findings (5)" in result.output
        assert (
            "5 violation(s) in 10 file(s) (SRP: 1, OCP: 1, LSP: 1, ISP: 1, DIP: 1)"
            in result.output
        )

    def test_strict_exits_with_findings_code(self, runner):
        result = runner.invoke(app, ["check", "--strict"])
        assert result.exit_code == EXIT_FINDINGS

    def test_json_report(self, runner):
        result = runner.invoke(app, ["check", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["summary"]["total_issues"] == 5
        assert len(data["files_analyzed"]) == 10
        assert {f["principle"] for f in data["findings"]} == {"srp", "ocp", "lsp", "isp", "dip"}
        assert all(f["file"].endswith("bad.py") for f in data["findings"])


class TestCheckPaths:
    def test_clean_file(self, runner, in_tmp_dir):
        (in_tmp_dir / "clean.py").write_text("def add(a, b):\n    return a + b\n")
        result = runner.invoke(app, ["check", "clean.py", "--strict"])

        assert result.exit_code == 0
        assert "No SOLID violations found in 1 file(s)." in result.output

    def test_directory_with_violation(self, runner, in_tmp_dir):
        package = in_tmp_dir / "pkg"
        package.mkdir()
        (package / "service.py").write_text(DIRTY_SOURCE)

        result = runner.invoke(app, ["check", "pkg"])

        assert result.exit_code == 0
        assert "DIP Violation: NotificationService" in result.output
        assert "service.py:4" in result.output

    def test_checker_settings_from_config(self, runner, in_tmp_dir):
        (in_tmp_dir / "service.py").write_text(DIRTY_SOURCE)
        (in_tmp_dir / "solid-examples.yaml").write_text(
            "checker:\n  allowed_instantiations: [EmailSender]\n"
        )

        result = runner.invoke(app, ["check", "service.py", "--strict"])

        assert result.exit_code == 0
        assert "No SOLID violations found" in result.output

    def test_missing_path(self, runner):
        result = runner.invoke(app, ["check", "nowhere.py"])

        assert result.exit_code == EXIT_USER_ERROR
        assert "PATH_NOT_FOUND" in result.output
        assert "nowhere.py" in result.output

    def test_undecodable_file_does_not_abort_check(self, runner, in_tmp_dir):
        package = in_tmp_dir / "pkg"
        package.mkdir()
        (package / "latin.py").write_bytes(b"# caf\xe9\nx = 1\n")
        (package / "service.py").write_text(DIRTY_SOURCE)

        result = runner.invoke(app, ["check", "pkg"])

        assert result.exit_code == 0
        assert "1 violation(s) in 2 file(s) (DIP: 1)" in result.output
