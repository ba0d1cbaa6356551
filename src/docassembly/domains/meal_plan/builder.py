"""Meal plan adapter: nutrition plan record -> section sequence.

Days hold meals, meals hold food items.  A bare top-level ``meals`` list is
treated as a single unlabeled day.  The grocery list is grouped by aisle
before rendering; see :func:`group_groceries`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from docassembly.fields import (
    PLACEHOLDER,
    first_present,
    format_number,
    is_present,
    normalize_group,
    resolve_list,
    resolve_mapping,
    resolve_text,
    to_display,
    to_number,
)
from docassembly.sections import Heading, ListSection, Section, Table, Text
from docassembly.tables import Column, build_meta, group_body, prose_sections

UNCATEGORIZED = "Other"
_UNIT_SUFFIX = re.compile(r"[A-Za-z%]\s*$")


def _with_unit(value: Any, unit: str) -> str:
    """Append *unit* to a bare number; values already carrying a unit pass through."""
    text = to_display(value)
    if _UNIT_SUFFIX.search(text) or to_number(value, default=None) is None:
        return text
    return f"{text}{unit}"


def _grams(value: Any) -> str:
    return _with_unit(value, "g")


FOOD_COLUMNS = (
    Column("Food", ("name", "food", "item")),
    Column("Serving", ("serving", "portion", "amount", "quantity")),
    Column("Calories", ("calories", "kcal")),
    Column("Protein", ("protein",), fmt=_grams),
    Column("Carbs", ("carbs", "carbohydrates"), fmt=_grams),
    Column("Fat", ("fat",), fmt=_grams),
)


def build_meal_plan_sections(data: Mapping[str, Any]) -> list[Section]:
    """Build meal plan sections from an artifact's data record."""
    sections: list[Section] = []
    days = _days(data)

    restrictions = to_display(
        resolve_list(data, "restrictions", "allergies", "dietaryRestrictions"), default="none"
    )
    meta = build_meta(
        [
            ("Plan", resolve_text(data, "planName", "name", "title", default="Meal Plan")),
            ("Duration", _duration(data, days)),
            ("Calories/Day", resolve_text(data, "dailyCalories", "targetCalories")),
            ("Meals/Day", resolve_text(data, "mealsPerDay")),
            ("Diet Type", resolve_text(data, "dietType", "type")),
            ("Restrictions", restrictions),
        ]
    )
    if meta:
        sections.append(meta)

    sections.extend(_macro_sections(resolve_mapping(data, "macros", "macroTargets")))

    for index, day in enumerate(days, start=1):
        sections.extend(_day_sections(day, index, labeled=len(days) > 1 or _has_label(day)))

    sections.extend(
        grocery_sections(first_present(data, "groceryList", "shoppingList", "ingredients"))
    )
    sections.extend(
        prose_sections("Nutrition Summary", first_present(data, "nutritionSummary", "summary"))
    )
    sections.extend(prose_sections("Notes & Tips", first_present(data, "notes", "tips")))
    return sections


# ── Grocery grouping ────────────────────────────────────────────────


def group_groceries(raw: Any) -> dict[str, list[str]]:
    """Partition grocery items by ``category``/``aisle``, in first-seen order.

    Items without a category land in ``"Other"``.  Each item is displayed as
    ``name — quantity`` (or just ``name``).
    """
    group = normalize_group(raw, text_key="name")
    grouped: dict[str, list[str]] = {}
    for item in group.records:
        category = resolve_text(item, "category", "aisle", default=UNCATEGORIZED)
        grouped.setdefault(category, []).append(_grocery_label(item))
    return grouped


def grocery_sections(raw: Any) -> list[Section]:
    group = normalize_group(raw, text_key="name")
    if not group:
        return []
    sections: list[Section] = [Heading(text="Grocery List")]
    if not group.structured:
        sections.append(ListSection(items=group.labels))
        return sections
    for category, items in group_groceries(raw).items():
        sections.append(Text(text=category))
        sections.append(ListSection(items=items))
    return sections


def _grocery_label(item: Mapping[str, Any]) -> str:
    name = resolve_text(item, "name", "item")
    quantity = first_present(item, "quantity", "amount")
    return f"{name} — {to_display(quantity)}" if quantity is not None else name


# ── Days and meals ──────────────────────────────────────────────────


def _days(data: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    days = resolve_list(data, "days", "schedule")
    if days:
        return [day if isinstance(day, Mapping) else {"meals": [day]} for day in days]
    meals = resolve_list(data, "meals")
    return [{"meals": meals}] if meals else []


def _has_label(day: Mapping[str, Any]) -> bool:
    return first_present(day, "day", "name", "label", "dayNumber") is not None


def _day_label(day: Mapping[str, Any], index: int) -> str:
    label = resolve_text(day, "day", "name", "label")
    if label != PLACEHOLDER:
        return label
    number = first_present(day, "dayNumber")
    return f"Day {format_number(number) if number is not None else index}"


def _day_sections(day: Mapping[str, Any], index: int, *, labeled: bool) -> list[Section]:
    body: list[Section] = []
    for meal in resolve_list(day, "meals"):
        body.extend(_meal_sections(meal))

    total = first_present(day, "totalCalories", "calories")
    if is_present(total):
        body.append(Text(text=f"Daily total: {to_display(total)} calories"))

    if not body:
        return []
    if labeled:
        return [Heading(text=_day_label(day, index)), *body]
    return body


def _meal_sections(meal: Any) -> list[Section]:
    if not isinstance(meal, Mapping):
        return [Heading(text="  Meal"), Text(text=to_display(meal))]

    label = resolve_text(meal, "name", "type", "label", default="Meal")
    sections: list[Section] = [Heading(text=f"  {label}")]

    sections.extend(
        group_body(first_present(meal, "items", "foods", "ingredients", "recipes"), FOOD_COLUMNS)
    )

    nutrition = _meal_nutrition(meal)
    if nutrition:
        sections.append(Text(text=nutrition))

    instructions = first_present(meal, "recipe", "instructions")
    if is_present(instructions):
        sections.append(Text(text=f"Instructions: {to_display(instructions)}"))

    times = []
    if is_present(meal.get("prepTime")):
        times.append(f"Prep: {to_display(meal['prepTime'])}")
    if is_present(meal.get("cookTime")):
        times.append(f"Cook: {to_display(meal['cookTime'])}")
    if times:
        sections.append(Text(text=" | ".join(times)))
    return sections


def _meal_nutrition(meal: Mapping[str, Any]) -> str:
    parts = []
    if is_present(meal.get("calories")):
        parts.append(f"Calories: {to_display(meal['calories'])}")
    for key, label in (("protein", "Protein"), ("carbs", "Carbs"), ("fat", "Fat")):
        if is_present(meal.get(key)):
            parts.append(f"{label}: {_grams(meal[key])}")
    return " | ".join(parts)


# ── Overview ────────────────────────────────────────────────────────


def _duration(data: Mapping[str, Any], days: list[Mapping[str, Any]]) -> str:
    duration = first_present(data, "duration")
    if duration is not None:
        return to_display(duration)
    if resolve_list(data, "days", "schedule"):
        return f"{len(days)} day" if len(days) == 1 else f"{len(days)} days"
    return PLACEHOLDER


def _macro_sections(macros: Mapping[str, Any] | None) -> list[Section]:
    if macros is None or not any(is_present(macros.get(k)) for k in ("protein", "carbs", "fat")):
        return []

    def target(key: str) -> str:
        return _grams(macros[key]) if is_present(macros.get(key)) else PLACEHOLDER

    def share(key: str) -> str:
        return _with_unit(macros[key], "%") if is_present(macros.get(key)) else PLACEHOLDER

    rows = [
        ["Protein", target("protein"), share("proteinPct")],
        ["Carbohydrates", target("carbs"), share("carbsPct")],
        ["Fat", target("fat"), share("fatPct")],
    ]
    if is_present(macros.get("fiber")):
        rows.append(["Fiber", target("fiber"), PLACEHOLDER])
    return [
        Heading(text="Daily Macro Targets"),
        Table(headers=("Macro", "Target", "% of Calories"), rows=rows),
    ]
