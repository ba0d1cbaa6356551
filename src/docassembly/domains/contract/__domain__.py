"""Contract domain manifest, discovered by DomainRegistry.auto_discover()."""

from __future__ import annotations

from docassembly.domains.registry import DomainConfig

domain = DomainConfig(
    name="contract",
    display_name="Legal Contract",
    description="Contract draft or analysis: parties, clauses, obligations, signatures",
    routes=(
        ("law", "draft-contract"),
        ("legal", "draft-contract"),
        ("law", "analyze-contract"),
        ("legal", "analyze-contract"),
    ),
    builder="docassembly.domains.contract.builder:build_contract_sections",
    exemplar="docassembly.domains.contract.exemplar:EXEMPLAR",
    default_title="Contract",
    filename_prefix="contract",
    aliases=("legal-contract",),
)
