"""Invoice domain manifest, discovered by DomainRegistry.auto_discover()."""

from __future__ import annotations

from docassembly.domains.registry import DomainConfig

domain = DomainConfig(
    name="invoice",
    display_name="Invoice",
    description="Billing invoice with line items and derived totals",
    routes=(
        ("accounting", "generate-invoice"),
        ("finance", "generate-invoice"),
    ),
    builder="docassembly.domains.invoice.builder:build_invoice_sections",
    exemplar="docassembly.domains.invoice.exemplar:EXEMPLAR",
    default_title="Invoice",
    filename_prefix="invoice",
    title_field="invoiceNumber",
    title_template="Invoice-{}",
)
