"""Invoice adapter with subtotal/tax/total derivation."""

from __future__ import annotations

from docassembly.domains.invoice.builder import (
    InvoiceTotals,
    build_invoice_sections,
    compute_invoice_totals,
)

__all__ = ["InvoiceTotals", "build_invoice_sections", "compute_invoice_totals"]
