"""Renderer contract validation for section sequences."""

from __future__ import annotations

from docassembly.validation.contract import validate_sections, validate_wire
from docassembly.validation.models import IssueSeverity, ValidationIssue, ValidationReport

__all__ = [
    "IssueSeverity",
    "ValidationIssue",
    "ValidationReport",
    "validate_sections",
    "validate_wire",
]
