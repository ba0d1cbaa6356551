"""Meal plan adapter with grocery grouping."""

from __future__ import annotations

from docassembly.domains.meal_plan.builder import build_meal_plan_sections, group_groceries

__all__ = ["build_meal_plan_sections", "group_groceries"]
