"""Tests for the contract adapter and signature block synthesis."""

from __future__ import annotations

from docassembly.domains.contract import build_contract_sections, signature_sections
from docassembly.sections import Heading, ListSection, Meta, MetaField, Table, Text
from docassembly.validation import validate_sections


def _signature(name: str) -> Text:
    return Text(text=f"\n____________________________\n{name}\nDate: _______________")


class TestSignatures:
    def test_empty_contract_gets_placeholder_signatures(self) -> None:
        assert build_contract_sections({}) == [
            Meta(fields=[MetaField("Type", "General Agreement"), MetaField("Status", "draft")]),
            Heading(text="Signatures"),
            _signature("Party A"),
            _signature("Party B"),
        ]

    def test_one_line_per_party(self) -> None:
        assert signature_sections([{"name": "Acme"}, {"role": "Witness"}, {}]) == [
            Heading(text="Signatures"),
            _signature("Acme"),
            _signature("Witness"),
            _signature("Party"),
        ]

    def test_string_parties(self) -> None:
        sections = build_contract_sections({"parties": ["Acme", "Globex"]})
        assert sections[1:3] == [Heading(text="Parties"), ListSection(items=["Acme", "Globex"])]
        assert sections[-2:] == [_signature("Acme"), _signature("Globex")]


class TestOverview:
    def test_synonyms(self) -> None:
        meta = build_contract_sections(
            {"type": "NDA", "endDate": "2027-01-01", "governingLaw": "Ontario", "status": "signed"}
        )[0]
        assert meta == Meta(
            fields=[
                MetaField("Type", "NDA"),
                MetaField("Expiration", "2027-01-01"),
                MetaField("Status", "signed"),
                MetaField("Jurisdiction", "Ontario"),
            ]
        )


class TestClauses:
    def test_mixed_clauses(self) -> None:
        sections = build_contract_sections(
            {
                "clauses": [
                    {"title": "1. Scope", "text": "Do the work.", "subclauses": ["1.1 Well", {"text": "1.2 Fast"}]},
                    "Catch-all clause.",
                    {"body": "Untitled clause."},
                    None,
                ]
            }
        )
        start = sections.index(Heading(text="Terms & Conditions"))
        assert sections[start + 1 : start + 6] == [
            Heading(text="1. Scope"),
            Text(text="Do the work."),
            ListSection(items=["1.1 Well", "1.2 Fast"]),
            Text(text="Catch-all clause."),
            Text(text="Untitled clause."),
        ]

    def test_title_only_clause_is_text(self) -> None:
        sections = build_contract_sections({"clauses": [{"title": "Scope"}]})
        start = sections.index(Heading(text="Terms & Conditions"))
        assert sections[start + 1] == Text(text="Scope")
        assert Heading(text="Scope") not in sections
        assert validate_sections(sections).issues == []

    def test_single_string_clause(self) -> None:
        sections = build_contract_sections({"terms": "All rights reserved."})
        assert Text(text="All rights reserved.") in sections

    def test_no_clause_heading_when_nothing_renders(self) -> None:
        sections = build_contract_sections({"clauses": [{}, ""]})
        assert Heading(text="Terms & Conditions") not in sections


class TestTables:
    def test_obligations_default_status(self) -> None:
        sections = build_contract_sections(
            {"obligations": [{"party": "Client", "obligation": "Pay invoices", "dueDate": "Net 30"}]}
        )
        index = sections.index(Heading(text="Obligations"))
        assert sections[index + 1] == Table(
            headers=("Party", "Obligation", "Deadline", "Status"),
            rows=(("Client", "Pay invoices", "Net 30", "pending"),),
        )

    def test_risk_severity_default(self) -> None:
        sections = build_contract_sections({"risks": [{"risk": "Auto-renewal"}]})
        index = sections.index(Heading(text="Risk Areas"))
        assert sections[index + 1].rows == (("Auto-renewal", "medium", "—"),)


class TestExemplar:
    def test_section_order(self, exemplars) -> None:
        sections = build_contract_sections(exemplars["contract"])
        headings = [s.text for s in sections if isinstance(s, Heading)]
        assert headings == [
            "Parties",
            "Terms & Conditions",
            "1. Services",
            "Key Terms",
            "Risk Areas",
            "Compensation",
            "Confidentiality",
            "Signatures",
        ]

    def test_meta_and_parties(self, exemplars) -> None:
        sections = build_contract_sections(exemplars["contract"])
        assert MetaField("Expiration", "2027-02-28") in sections[0].fields
        assert sections[2] == Table(
            headers=("Role", "Name", "Entity", "Contact"),
            rows=(
                ("Service Provider", "CloudTech Inc.", "—", "legal@cloudtech.example"),
                ("Client", "Meridian Corporation", "—", "—"),
            ),
        )

    def test_compensation_meta(self, exemplars) -> None:
        sections = build_contract_sections(exemplars["contract"])
        index = sections.index(Heading(text="Compensation"))
        assert sections[index + 1] == Meta(
            fields=[MetaField("Monthly Fee", "$4,500"), MetaField("Billing Cycle", "monthly")]
        )

    def test_ends_with_signatures(self, exemplars) -> None:
        sections = build_contract_sections(exemplars["contract"])
        assert sections[-2:] == [_signature("CloudTech Inc."), _signature("Meridian Corporation")]
