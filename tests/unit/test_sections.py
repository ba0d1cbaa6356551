"""Tests for the section model and its wire shape."""

from __future__ import annotations

import pytest

from docassembly.exceptions import SectionContractError
from docassembly.sections import (
    Heading,
    ListSection,
    Meta,
    MetaField,
    Table,
    Text,
    section_from_dict,
    sections_from_wire,
    sections_to_wire,
)


class TestWireShape:
    def test_heading(self) -> None:
        assert Heading(text="Goals").to_dict() == {"type": "heading", "text": "Goals"}

    def test_text(self) -> None:
        assert Text(text="Prose.").to_dict() == {"type": "text", "text": "Prose."}

    def test_list(self) -> None:
        assert ListSection(items=["a", "b"]).to_dict() == {"type": "list", "items": ["a", "b"]}

    def test_meta(self) -> None:
        meta = Meta(fields=[MetaField(label="Name", value="Jane")])
        assert meta.to_dict() == {
            "type": "meta",
            "fields": [{"label": "Name", "value": "Jane"}],
        }

    def test_table(self) -> None:
        table = Table(headers=["A", "B"], rows=[["1", "2"], ["3", "4"]])
        assert table.to_dict() == {
            "type": "table",
            "headers": ["A", "B"],
            "rows": [["1", "2"], ["3", "4"]],
        }

    def test_sections_to_wire_keeps_order(self) -> None:
        wire = sections_to_wire([Heading(text="One"), Text(text="Two")])
        assert [item["type"] for item in wire] == ["heading", "text"]


class TestTableArity:
    def test_short_row_rejected(self) -> None:
        with pytest.raises(SectionContractError, match="row 1"):
            Table(headers=["A", "B"], rows=[["1", "2"], ["3"]])

    def test_long_row_rejected(self) -> None:
        with pytest.raises(SectionContractError):
            Table(headers=["A"], rows=[["1", "2"]])

    def test_empty_rows_allowed_at_construction(self) -> None:
        assert Table(headers=["A"], rows=[]).rows == ()


class TestValueEquality:
    def test_lists_and_tuples_compare_equal(self) -> None:
        assert Table(headers=["A"], rows=[["1"]]) == Table(headers=("A",), rows=(("1",),))

    def test_frozen(self) -> None:
        heading = Heading(text="X")
        with pytest.raises(AttributeError):
            heading.text = "Y"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({ListSection(items=["a"]), ListSection(items=("a",))}) == 1


class TestFromWire:
    def test_parses_every_variant(self) -> None:
        payload = [
            {"type": "heading", "text": "H"},
            {"type": "meta", "fields": [{"label": "L", "value": "V"}]},
            {"type": "table", "headers": ["A"], "rows": [["1"]]},
            {"type": "list", "items": ["x"]},
            {"type": "text", "text": "T"},
        ]
        sections = sections_from_wire(payload)
        assert sections_to_wire(sections) == payload

    def test_unknown_type(self) -> None:
        with pytest.raises(SectionContractError, match="Unknown section type"):
            section_from_dict({"type": "chart"})

    def test_missing_field(self) -> None:
        with pytest.raises(SectionContractError, match="Malformed 'heading'"):
            section_from_dict({"type": "heading"})

    def test_not_an_object(self) -> None:
        with pytest.raises(SectionContractError):
            section_from_dict(["heading"])  # type: ignore[arg-type]

    def test_bad_arity_on_the_wire(self) -> None:
        with pytest.raises(SectionContractError):
            section_from_dict({"type": "table", "headers": ["A", "B"], "rows": [["1"]]})
