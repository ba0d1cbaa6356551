"""docassembly: turn free-form domain records into renderer section sequences.

Usage::

    from docassembly import Artifact, assemble, build_sections

    sections = build_sections("invoice", {"items": [{"quantity": 2, "unitPrice": 10}]})

    plan = assemble(Artifact(id="a1", data=record, domain="healthcare",
                             action="build-care-plan"))
    plan.sections, plan.page_info, plan.filename
"""

from __future__ import annotations

from docassembly.assembly import (
    Artifact,
    DocumentPlan,
    PageInfo,
    assemble,
    build_sections,
    resolve_adapter,
    slugify,
)
from docassembly.core.config import AppSettings
from docassembly.domains.care_plan import build_care_plan_sections
from docassembly.domains.contract import build_contract_sections
from docassembly.domains.invoice import (
    InvoiceTotals,
    build_invoice_sections,
    compute_invoice_totals,
)
from docassembly.domains.meal_plan import build_meal_plan_sections, group_groceries
from docassembly.domains.registry import DomainConfig, DomainRegistry, get_registry
from docassembly.domains.workout import build_workout_sections
from docassembly.exceptions import (
    DocAssemblyError,
    RecordShapeError,
    SectionContractError,
    UnknownArtifactTypeError,
)
from docassembly.sections import (
    Heading,
    ListSection,
    Meta,
    MetaField,
    Section,
    Table,
    Text,
    sections_from_wire,
    sections_to_wire,
)

__all__ = [
    # Assembly
    "Artifact",
    "DocumentPlan",
    "PageInfo",
    "assemble",
    "build_sections",
    "resolve_adapter",
    "slugify",
    # Adapters
    "InvoiceTotals",
    "build_care_plan_sections",
    "build_contract_sections",
    "build_invoice_sections",
    "build_meal_plan_sections",
    "build_workout_sections",
    "compute_invoice_totals",
    "group_groceries",
    # Registry
    "DomainConfig",
    "DomainRegistry",
    "get_registry",
    # Sections
    "Heading",
    "ListSection",
    "Meta",
    "MetaField",
    "Section",
    "Table",
    "Text",
    "sections_from_wire",
    "sections_to_wire",
    # Config / errors
    "AppSettings",
    "DocAssemblyError",
    "RecordShapeError",
    "SectionContractError",
    "UnknownArtifactTypeError",
]
