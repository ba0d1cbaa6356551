"""Renderer contract checks over a section sequence.

Rules:

- SC-001 (error): every table row has ``len(headers)`` cells.
- SC-002 (error): every leaf value is a string.
- SC-003 (error): tables, lists and meta blocks are never empty.
- SC-004 (warning): a heading is followed by at least one section.
- SC-005 (warning): headings and text blocks are not blank.

``Table`` objects cannot be built with a bad row, so SC-001 fires mainly on
wire payloads parsed with :func:`validate_wire`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from docassembly.exceptions import SectionContractError
from docassembly.sections import (
    Heading,
    ListSection,
    Meta,
    Section,
    Table,
    Text,
    section_from_dict,
)
from docassembly.validation.models import IssueSeverity, ValidationIssue, ValidationReport

log = logging.getLogger(__name__)

_RULE_NAMES = {
    "SC-000": "Known section shape",
    "SC-001": "Table row arity",
    "SC-002": "String leaf values",
    "SC-003": "No empty blocks",
    "SC-004": "Heading has content",
    "SC-005": "No blank prose",
}

_RULE_SEVERITY = {
    "SC-000": IssueSeverity.ERROR,
    "SC-001": IssueSeverity.ERROR,
    "SC-002": IssueSeverity.ERROR,
    "SC-003": IssueSeverity.ERROR,
    "SC-004": IssueSeverity.WARNING,
    "SC-005": IssueSeverity.WARNING,
}


def validate_sections(sections: Sequence[Section]) -> ValidationReport:
    """Check a sequence of section objects against the renderer contract."""
    report = ValidationReport(total_sections=len(sections))
    for index, section in enumerate(sections):
        report.issues.extend(_check_section(index, section))

    if sections and isinstance(sections[-1], Heading):
        report.issues.append(
            _issue(
                "SC-004",
                f"Heading {sections[-1].text!r} ends the document with nothing beneath it",
                len(sections) - 1,
                Heading.kind,
            )
        )
    return report.finalize()


def validate_wire(payload: Iterable[Any]) -> ValidationReport:
    """Parse wire dicts and check them; unparsable entries become SC-000 errors."""
    items = list(payload)
    parsed: list[Section] = []
    positions: list[int] = []
    pre_issues: list[ValidationIssue] = []
    for index, item in enumerate(items):
        if isinstance(item, Mapping) and item.get("type") == Table.kind:
            arity_issues = _check_raw_table(index, item)
            if arity_issues:
                pre_issues.extend(arity_issues)
                continue
        try:
            parsed.append(section_from_dict(item))
        except SectionContractError as exc:
            pre_issues.append(_issue("SC-000", str(exc), index, _tag(item)))
            continue
        positions.append(index)

    report = validate_sections(parsed)
    # map indices back to positions in the original payload
    for issue in report.issues:
        if 0 <= issue.section_index < len(positions):
            issue.section_index = positions[issue.section_index]
    report.issues[:0] = pre_issues
    report.total_sections = len(items)
    if pre_issues:
        log.debug("Wire payload had %d malformed sections", len(pre_issues))
    return report.finalize()


# ── Per-section checks ──────────────────────────────────────────────


def _check_section(index: int, section: Section) -> list[ValidationIssue]:
    if isinstance(section, (Heading, Text)):
        return _check_prose(index, section)
    if isinstance(section, Meta):
        return _check_meta(index, section)
    if isinstance(section, Table):
        return _check_table(index, section)
    if isinstance(section, ListSection):
        return _check_list(index, section)
    return [_issue("SC-000", f"Unknown section object {type(section).__name__}", index, "")]


def _check_prose(index: int, section: Heading | Text) -> list[ValidationIssue]:
    if not isinstance(section.text, str):
        return [_leaf_issue(index, section.kind, "text", section.text)]
    if not section.text.strip():
        return [_issue("SC-005", f"Blank {section.kind}", index, section.kind, "text")]
    return []


def _check_meta(index: int, section: Meta) -> list[ValidationIssue]:
    if not section.fields:
        return [_issue("SC-003", "Empty meta block", index, Meta.kind, "fields")]
    issues = []
    for position, meta_field in enumerate(section.fields):
        for name in ("label", "value"):
            value = getattr(meta_field, name)
            if not isinstance(value, str):
                issues.append(_leaf_issue(index, Meta.kind, f"fields[{position}].{name}", value))
    return issues


def _check_table(index: int, section: Table) -> list[ValidationIssue]:
    issues = []
    if not section.rows:
        issues.append(_issue("SC-003", "Table has no rows", index, Table.kind, "rows"))
    for position, header in enumerate(section.headers):
        if not isinstance(header, str):
            issues.append(_leaf_issue(index, Table.kind, f"headers[{position}]", header))
    for row_index, row in enumerate(section.rows):
        for cell_index, cell in enumerate(row):
            if not isinstance(cell, str):
                issues.append(
                    _leaf_issue(index, Table.kind, f"rows[{row_index}][{cell_index}]", cell)
                )
    return issues


def _check_list(index: int, section: ListSection) -> list[ValidationIssue]:
    issues = []
    if not section.items:
        issues.append(_issue("SC-003", "List has no items", index, ListSection.kind, "items"))
    for position, item in enumerate(section.items):
        if not isinstance(item, str):
            issues.append(_leaf_issue(index, ListSection.kind, f"items[{position}]", item))
    return issues


def _check_raw_table(index: int, item: Mapping[str, Any]) -> list[ValidationIssue]:
    headers = item.get("headers")
    rows = item.get("rows")
    if not isinstance(headers, list) or not isinstance(rows, list):
        return []
    issues = []
    for row_index, row in enumerate(rows):
        if isinstance(row, list) and len(row) != len(headers):
            issues.append(
                _issue(
                    "SC-001",
                    f"Row {row_index} has {len(row)} cells, expected {len(headers)}",
                    index,
                    Table.kind,
                    f"rows[{row_index}]",
                    str(len(row)),
                )
            )
    return issues


# ── Helpers ─────────────────────────────────────────────────────────


def _tag(item: Any) -> str:
    return str(item.get("type", "")) if isinstance(item, Mapping) else ""


def _leaf_issue(index: int, kind: str, path: str, value: Any) -> ValidationIssue:
    return _issue(
        "SC-002",
        f"Leaf {path} is {type(value).__name__}, expected str",
        index,
        kind,
        path,
        repr(value),
    )


def _issue(
    rule_id: str,
    message: str,
    index: int,
    kind: str,
    path: str = "",
    actual: str = "",
) -> ValidationIssue:
    return ValidationIssue(
        rule_id=rule_id,
        rule_name=_RULE_NAMES[rule_id],
        severity=_RULE_SEVERITY[rule_id],
        message=message,
        section_index=index,
        section_type=kind,
        field_path=path,
        actual_value=actual,
    )
