"""Tests for the JSON wire renderer."""

from __future__ import annotations

import json

from docassembly.assembly import Artifact, PageInfo, assemble
from docassembly.formatters.json_formatter import JSONFormatter
from docassembly.sections import Heading, Meta, MetaField, Table, Text

PAGE = PageInfo(title="Invoice-42", domain="accounting", generated_at="2026-10-19T00:00:00+00:00")
SECTIONS = [
    Heading(text="Summary"),
    Meta(fields=[MetaField("Status", "paid")]),
    Table(headers=["Item", "Amount"], rows=[["Total", "€5.00"]]),
    Text(text="Danke."),
]


class TestJSONFormatter:
    def test_render_payload(self) -> None:
        payload = json.loads(JSONFormatter().render(SECTIONS, PAGE))
        assert payload["pageInfo"] == {
            "title": "Invoice-42",
            "domain": "accounting",
            "generatedAt": "2026-10-19T00:00:00+00:00",
        }
        assert [s["type"] for s in payload["sections"]] == ["heading", "meta", "table", "text"]
        assert payload["sections"][2]["rows"] == [["Total", "€5.00"]]

    def test_non_ascii_kept_verbatim(self) -> None:
        raw = JSONFormatter().render(SECTIONS, PAGE)
        assert "€5.00".encode("utf-8") in raw

    def test_indent(self) -> None:
        assert b"\n  " in JSONFormatter(indent=2).render(SECTIONS, PAGE)
        assert b"\n" not in JSONFormatter(indent=None).render(SECTIONS, PAGE)

    def test_render_to_file(self, tmp_path) -> None:
        out = JSONFormatter().render_to_file(SECTIONS, PAGE, tmp_path / "plan.json")
        assert out == tmp_path / "plan.json"
        assert json.loads(out.read_text(encoding="utf-8"))["sections"][3]["text"] == "Danke."

    def test_render_plan(self, registry) -> None:
        plan = assemble(
            Artifact(id="c-1", data={}, domain="law", action="draft-contract"),
            registry=registry,
            generated_at="2026-10-19T00:00:00+00:00",
        )
        payload = json.loads(JSONFormatter().render_plan(plan))
        assert payload["filename"] == "contract-c-1.pdf"
        assert payload["adapter"] == "contract"
        assert payload["sections"][-1]["text"].endswith("Date: _______________")

    def test_content_type(self) -> None:
        assert JSONFormatter().content_type == "application/json"
