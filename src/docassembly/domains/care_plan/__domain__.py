"""Care plan domain manifest, discovered by DomainRegistry.auto_discover()."""

from __future__ import annotations

from docassembly.domains.registry import DomainConfig

domain = DomainConfig(
    name="care_plan",
    display_name="Care Plan",
    description="Patient care plan: diagnoses, goals, interventions, medications",
    routes=(("healthcare", "build-care-plan"),),
    builder="docassembly.domains.care_plan.builder:build_care_plan_sections",
    exemplar="docassembly.domains.care_plan.exemplar:EXEMPLAR",
    default_title="Care Plan",
    filename_prefix="care-plan",
    aliases=("care-plan", "careplan"),
)
