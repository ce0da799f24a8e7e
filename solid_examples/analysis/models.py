"""
Data models for SOLID checker findings and reports.

This module provides dataclasses for the checker:
- Finding: A single SOLID violation with location and suggested refactoring
- CheckReport: All findings for a set of analyzed files

All dataclasses support:
- from_dict(cls, data) -> Self: Create instance from dict
- to_dict(self) -> dict: Convert to dict for JSON serialization
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from solid_examples.catalog import Principle


# ============================================================
# Enums
# ============================================================

class Severity(str, Enum):
    """Severity levels for findings."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    """Priority classifications for findings."""
    FIX_NOW = "fix_now"
    FIX_LATER = "fix_later"
    IGNORE = "ignore"


# ============================================================
# Finding Dataclass
# ============================================================

@dataclass
class Finding:
    """A SOLID violation found in a source file.

    Attributes:
        finding_id: Unique identifier within one checker run (e.g., "SOLID-001")
        principle: Which SOLID principle is violated
        severity: How serious the issue is (high, medium, low)
        file: Path to the file containing the issue
        line: Line number where the issue occurs
        title: Short description of the issue
        description: Detailed explanation of the issue
        code_snippet: Code excerpt showing the issue
        refactoring_pattern: Name of the refactoring pattern to apply
        refactoring_steps: Step-by-step instructions for the fix
        priority: When to fix (fix_now, fix_later, ignore)
        confidence: Confidence score (0.0 to 1.0)
    """
    finding_id: str
    principle: Principle
    severity: Severity
    file: str
    line: int
    title: str
    description: str
    code_snippet: str = ""
    refactoring_pattern: str = ""
    refactoring_steps: list[str] = field(default_factory=list)
    priority: Priority = Priority.FIX_LATER
    confidence: float = 0.8

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Finding":
        """Create a Finding from a dictionary."""
        return cls(
            finding_id=data["finding_id"],
            principle=Principle(data["principle"]),
            severity=Severity(data["severity"]),
            file=data["file"],
            line=data["line"],
            title=data["title"],
            description=data["description"],
            code_snippet=data.get("code_snippet", ""),
            refactoring_pattern=data.get("refactoring_pattern", ""),
            refactoring_steps=list(data.get("refactoring_steps", [])),
            priority=Priority(data.get("priority", "fix_later")),
            confidence=data.get("confidence", 0.8),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert Finding to a dictionary."""
        return {
            "finding_id": self.finding_id,
            "principle": self.principle.value,
            "severity": self.severity.value,
            "file": self.file,
            "line": self.line,
            "title": self.title,
            "description": self.description,
            "code_snippet": self.code_snippet,
            "refactoring_pattern": self.refactoring_pattern,
            "refactoring_steps": list(self.refactoring_steps),
            "priority": self.priority.value,
            "confidence": self.confidence,
        }


# ============================================================
# CheckReport Dataclass
# ============================================================

@dataclass
class CheckReport:
    """Findings for one checker run over a set of files."""
    files_analyzed: list[str] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.findings)

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

    def by_principle(self) -> dict[str, int]:
        """Count findings per principle (every principle present, zero if clean)."""
        counts = {principle.value: 0 for principle in Principle}
        for finding in self.findings:
            counts[finding.principle.value] += 1
        return counts

    def for_file(self, file: str) -> list[Finding]:
        return [finding for finding in self.findings if finding.file == file]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckReport":
        """Create a CheckReport from a dictionary."""
        return cls(
            files_analyzed=list(data.get("files_analyzed", [])),
            findings=[Finding.from_dict(f) for f in data.get("findings", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert CheckReport to a dictionary."""
        return {
            "files_analyzed": list(self.files_analyzed),
            "summary": {
                "total_issues": self.total_issues,
                "by_principle": self.by_principle(),
            },
            "findings": [f.to_dict() for f in self.findings],
        }
