"""Contract adapter: legal agreement record -> section sequence.

The document always ends with a signature block, one line per party, since a
contract is not complete without one.  With no parties on record two generic
placeholders are used.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docassembly.fields import (
    first_present,
    is_present,
    normalize_group,
    resolve_list,
    resolve_text,
    to_display,
)
from docassembly.sections import Heading, ListSection, Section, Text
from docassembly.tables import (
    Column,
    build_meta,
    describe_item,
    group_sections,
    prose_sections,
)

PLACEHOLDER_PARTIES = ({"name": "Party A"}, {"name": "Party B"})
SIGNATURE_LINE = "____________________________"
DATE_LINE = "Date: _______________"

PARTY_COLUMNS = (
    Column("Role", ("role",), default="Party"),
    Column("Name", ("name",)),
    Column("Entity", ("entity", "organization")),
    Column("Contact", ("email", "contact")),
)

OBLIGATION_COLUMNS = (
    Column("Party", ("party",)),
    Column("Obligation", ("description", "obligation")),
    Column("Deadline", ("deadline", "dueDate")),
    Column("Status", ("status",), default="pending"),
)

KEY_TERM_COLUMNS = (
    Column("Clause", ("clause", "title", "name")),
    Column("Summary", ("summary", "description")),
    Column("Concern", ("concern", "issue")),
)

RISK_COLUMNS = (
    Column("Risk", ("risk", "description")),
    Column("Severity", ("severity", "level"), default="medium"),
    Column("Recommendation", ("recommendation", "mitigation")),
)


def build_contract_sections(data: Mapping[str, Any]) -> list[Section]:
    """Build contract sections from an artifact's data record."""
    sections: list[Section] = []

    meta = build_meta(
        [
            ("Contract #", resolve_text(data, "contractNumber", "id")),
            ("Type", resolve_text(data, "contractType", "type", default="General Agreement")),
            ("Effective Date", resolve_text(data, "effectiveDate", "startDate")),
            ("Expiration", resolve_text(data, "expirationDate", "endDate", "terminationDate")),
            ("Status", resolve_text(data, "status", default="draft")),
            ("Jurisdiction", resolve_text(data, "jurisdiction", "governingLaw")),
        ]
    )
    if meta:
        sections.append(meta)

    parties = normalize_group(first_present(data, "parties"), text_key="name")
    sections.extend(group_sections("Parties", first_present(data, "parties"), PARTY_COLUMNS))
    sections.extend(prose_sections("Recitals", first_present(data, "recitals", "background")))
    sections.extend(_clause_sections(first_present(data, "clauses", "terms", "sections")))

    sections.extend(group_sections("Key Terms", first_present(data, "keyTerms"), KEY_TERM_COLUMNS))
    sections.extend(
        group_sections("Risk Areas", first_present(data, "riskAreas", "risks"), RISK_COLUMNS)
    )
    sections.extend(prose_sections("Recommendations", first_present(data, "recommendations")))
    sections.extend(
        group_sections("Obligations", first_present(data, "obligations"), OBLIGATION_COLUMNS)
    )

    sections.extend(
        prose_sections(
            "Compensation",
            first_present(data, "compensation", "paymentTerms", "consideration"),
        )
    )
    sections.extend(prose_sections("Confidentiality", first_present(data, "confidentiality")))
    sections.extend(prose_sections("Termination", first_present(data, "termination")))

    sections.extend(signature_sections(parties.records))

    disclaimer = first_present(data, "disclaimer")
    if is_present(disclaimer):
        sections.append(Text(text=to_display(disclaimer)))

    return sections


def signature_sections(parties: Any) -> list[Section]:
    """Signature heading plus one signature line per party."""
    signers = list(parties) or list(PLACEHOLDER_PARTIES)
    sections: list[Section] = [Heading(text="Signatures")]
    for party in signers:
        name = resolve_text(party, "name", "role", default="Party")
        sections.append(Text(text=f"\n{SIGNATURE_LINE}\n{name}\n{DATE_LINE}"))
    return sections


def _clause_sections(raw: Any) -> list[Section]:
    clauses = raw if isinstance(raw, (list, tuple)) else [raw]
    sections: list[Section] = [Heading(text="Terms & Conditions")]
    for clause in clauses:
        if not is_present(clause):
            continue
        if not isinstance(clause, Mapping):
            sections.append(Text(text=to_display(clause)))
            continue
        title = first_present(clause, "title", "heading")
        body = first_present(clause, "text", "body", "content")
        subclauses = [
            describe_item(item, "text") for item in resolve_list(clause, "subclauses")
        ]
        if is_present(title):
            # A bare title is a one-line clause, not a heading over nothing
            if is_present(body) or subclauses:
                sections.append(Heading(text=to_display(title)))
            else:
                sections.append(Text(text=to_display(title)))
        if is_present(body):
            sections.append(Text(text=to_display(body)))
        if subclauses:
            sections.append(ListSection(items=subclauses))
    return sections if len(sections) > 1 else []
