"""Meal plan domain manifest, discovered by DomainRegistry.auto_discover()."""

from __future__ import annotations

from docassembly.domains.registry import DomainConfig

domain = DomainConfig(
    name="meal_plan",
    display_name="Meal Plan",
    description="Nutrition plan: daily meals, macro targets and grocery list",
    routes=(
        ("food", "build-meal-plan"),
        ("food", "generate-meal-plan"),
    ),
    builder="docassembly.domains.meal_plan.builder:build_meal_plan_sections",
    exemplar="docassembly.domains.meal_plan.exemplar:EXEMPLAR",
    default_title="Meal Plan",
    filename_prefix="meal-plan",
    aliases=("meal-plan", "mealplan"),
)
