"""Healthcare care plan adapter."""

from __future__ import annotations

from docassembly.domains.care_plan.builder import build_care_plan_sections

__all__ = ["build_care_plan_sections"]
