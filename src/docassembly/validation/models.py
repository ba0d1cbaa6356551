"""Validation data models: issues and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class IssueSeverity(str, Enum):
    """Severity of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single contract issue found in a section sequence."""

    rule_id: str
    rule_name: str
    severity: IssueSeverity
    message: str
    section_index: int = -1
    section_type: str = ""
    field_path: str = ""
    actual_value: str = ""


@dataclass
class ValidationReport:
    """Aggregated result of checking one section sequence."""

    total_sections: int = 0
    total_issues: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    issues: list[ValidationIssue] = field(default_factory=list)
    passed: bool = True
    validated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def has_errors(self) -> bool:
        """Return True if any ERROR-level issues exist."""
        return self.error_count > 0

    def issues_by_rule(self) -> dict[str, list[ValidationIssue]]:
        """Group issues by their rule id."""
        grouped: dict[str, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.rule_id, []).append(issue)
        return grouped

    def finalize(self) -> ValidationReport:
        """Recompute counts from ``issues``."""
        self.total_issues = len(self.issues)
        self.error_count = sum(1 for i in self.issues if i.severity == IssueSeverity.ERROR)
        self.warning_count = sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING)
        self.info_count = sum(1 for i in self.issues if i.severity == IssueSeverity.INFO)
        self.passed = self.error_count == 0
        return self
