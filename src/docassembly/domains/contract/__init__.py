"""Legal contract adapter with signature block synthesis."""

from __future__ import annotations

from docassembly.domains.contract.builder import build_contract_sections, signature_sections

__all__ = ["build_contract_sections", "signature_sections"]
