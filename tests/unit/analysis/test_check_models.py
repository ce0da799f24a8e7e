"""Tests for Finding and CheckReport serialization and counts."""

import json

from solid_examples.analysis.models import CheckReport, Finding, Priority, Severity
from solid_examples.catalog import Principle


def make_finding(**overrides):
    values = dict(
        finding_id="SOLID-001",
        principle=Principle.DIP,
        severity=Severity.MEDIUM,
        file="service.py",
        line=4,
        title="DIP Violation: Service",
        description="Service instantiates Repository directly",
    )
    values.update(overrides)
    return Finding(**values)


class TestFinding:
    def test_defaults(self):
        finding = make_finding()
        assert finding.priority == Priority.FIX_LATER
        assert finding.refactoring_steps == []
        assert finding.confidence == 0.8

    def test_to_dict_uses_plain_values(self):
        data = make_finding(refactoring_steps=["Inject it"]).to_dict()

        assert data["principle"] == "dip"
        assert data["severity"] == "medium"
        assert data["priority"] == "fix_later"
        assert data["refactoring_steps"] == ["Inject it"]
        json.dumps(data)

    def test_from_dict_fills_optional_fields(self):
        finding = Finding.from_dict({
            "finding_id": "SOLID-007",
            "principle": "lsp",
            "severity": "high",
            "file": "birds.py",
            "line": 12,
            "title": "LSP Violation: Penguin.fly",
            "description": "Penguin refuses to fly",
        })

        assert finding.principle == Principle.LSP
        assert finding.severity == Severity.HIGH
        assert finding.code_snippet == ""
        assert finding.priority == Priority.FIX_LATER


class TestCheckReport:
    def test_empty_report(self):
        report = CheckReport()
        assert report.total_issues == 0
        assert not report.has_findings
        assert report.by_principle() == {"srp": 0, "ocp": 0, "lsp": 0, "isp": 0, "dip": 0}

    def test_counts_by_principle(self):
        report = CheckReport(
            files_analyzed=["a.py", "b.py"],
            findings=[
                make_finding(file="a.py"),
                make_finding(finding_id="SOLID-002", file="b.py"),
                make_finding(finding_id="SOLID-003", principle=Principle.SRP, file="b.py"),
            ],
        )

        assert report.total_issues == 3
        assert report.by_principle()["dip"] == 2
        assert report.by_principle()["srp"] == 1
        assert [f.finding_id for f in report.for_file("b.py")] == ["SOLID-002", "SOLID-003"]

    def test_to_dict_has_summary(self):
        report = CheckReport(files_analyzed=["a.py"], findings=[make_finding(file="a.py")])
        data = report.to_dict()

        assert data["files_analyzed"] == ["a.py"]
        assert data["summary"]["total_issues"] == 1
        assert data["summary"]["by_principle"]["dip"] == 1
        assert data["findings"][0]["finding_id"] == "SOLID-001"

    def test_from_dict_reads_to_dict_output(self):
        report = CheckReport(files_analyzed=["a.py"], findings=[make_finding(file="a.py")])
        restored = CheckReport.from_dict(json.loads(json.dumps(report.to_dict())))

        assert restored == report
