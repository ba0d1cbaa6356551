"""Section model: the typed vocabulary adapters emit and the renderer consumes.

A document is an ordered ``list[Section]``; order is reading order.  Every
leaf value is a final display string, so the renderer never formats anything
itself.  The wire shape is tagged by ``type``::

    {"type": "heading", "text": "Medications"}
    {"type": "meta", "fields": [{"label": "Name", "value": "Jane Doe"}]}
    {"type": "table", "headers": ["A", "B"], "rows": [["1", "2"]]}
    {"type": "list", "items": ["one", "two"]}
    {"type": "text", "text": "Free-form prose."}

Adding a variant or renaming a field is a breaking change for the renderer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from docassembly.exceptions import SectionContractError


@dataclass(frozen=True)
class Heading:
    """A section title; carries no meaning beyond its position."""

    text: str

    kind: ClassVar[str] = "heading"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "text": self.text}


@dataclass(frozen=True)
class MetaField:
    """One ``label: value`` pair of a meta block."""

    label: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class Meta:
    """A small key/value summary block."""

    fields: tuple[MetaField, ...]

    kind: ClassVar[str] = "meta"

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "fields": [f.to_dict() for f in self.fields]}


@dataclass(frozen=True)
class Table:
    """Tabular block; every row has exactly ``len(headers)`` cells."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    kind: ClassVar[str] = "table"

    def __post_init__(self) -> None:
        headers = tuple(self.headers)
        rows = tuple(tuple(row) for row in self.rows)
        for index, row in enumerate(rows):
            if len(row) != len(headers):
                raise SectionContractError(
                    f"Table row {index} has {len(row)} cells, expected {len(headers)}"
                )
        object.__setattr__(self, "headers", headers)
        object.__setattr__(self, "rows", rows)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class ListSection:
    """A bulleted list of display strings."""

    items: tuple[str, ...]

    kind: ClassVar[str] = "list"

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "items": list(self.items)}


@dataclass(frozen=True)
class Text:
    """Free-form prose, already fully formatted."""

    text: str

    kind: ClassVar[str] = "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "text": self.text}


Section = Union[Heading, Meta, Table, ListSection, Text]

SECTION_TYPES: dict[str, type] = {
    cls.kind: cls for cls in (Heading, Meta, Table, ListSection, Text)
}


# ── Wire conversion ─────────────────────────────────────────────────


def sections_to_wire(sections: Iterable[Section]) -> list[dict[str, Any]]:
    """Serialize sections to the renderer's tagged-dict shape."""
    return [section.to_dict() for section in sections]


def section_from_dict(payload: Mapping[str, Any]) -> Section:
    """Parse one wire dict back into a section object.

    Raises:
        SectionContractError: On an unknown tag or a missing field.
    """
    if not isinstance(payload, Mapping):
        raise SectionContractError(f"Section must be an object, got {type(payload).__name__}")
    tag = payload.get("type")
    try:
        if tag == Heading.kind:
            return Heading(text=payload["text"])
        if tag == Text.kind:
            return Text(text=payload["text"])
        if tag == ListSection.kind:
            return ListSection(items=payload["items"])
        if tag == Meta.kind:
            return Meta(
                fields=[MetaField(label=f["label"], value=f["value"]) for f in payload["fields"]]
            )
        if tag == Table.kind:
            return Table(headers=payload["headers"], rows=payload["rows"])
    except (KeyError, TypeError) as exc:
        raise SectionContractError(f"Malformed {tag!r} section: {exc}") from exc
    raise SectionContractError(
        f"Unknown section type {tag!r}. Known: {sorted(SECTION_TYPES)}"
    )


def sections_from_wire(payload: Iterable[Mapping[str, Any]]) -> list[Section]:
    """Parse a full wire payload."""
    return [section_from_dict(item) for item in payload]


__all__ = [
    "Heading",
    "ListSection",
    "Meta",
    "MetaField",
    "SECTION_TYPES",
    "Section",
    "Table",
    "Text",
    "section_from_dict",
    "sections_from_wire",
    "sections_to_wire",
]
