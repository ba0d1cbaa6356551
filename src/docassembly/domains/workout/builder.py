"""Workout program adapter: training program record -> section sequence.

Programs arrive either as ``weeks -> days -> exercises`` or as a flat
``days``/``sessions`` list.  Each day gets its own heading, the warm-up, the
exercise table and the cool-down, in that order.  Days with nothing to show
are skipped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docassembly.fields import (
    PLACEHOLDER,
    first_present,
    format_number,
    is_present,
    resolve_list,
    resolve_text,
    to_display,
)
from docassembly.sections import Heading, Section, Text
from docassembly.tables import Column, build_meta, group_body, prose_sections

DAY_KEYS = ("days", "sessions", "workouts", "schedule")

EXERCISE_COLUMNS = (
    Column("Exercise", ("name", "exercise", "movement")),
    Column("Sets", ("sets",)),
    Column("Reps", ("reps", "repetitions", "duration")),
    Column("Rest", ("rest", "restPeriod")),
    Column("Notes", ("notes", "cues", "tips")),
)


def build_workout_sections(data: Mapping[str, Any]) -> list[Section]:
    """Build workout program sections from an artifact's data record."""
    sections: list[Section] = []

    meta = build_meta(
        [
            ("Program", resolve_text(data, "title", "name", "programName", default="Workout Program")),
            ("Goal", resolve_text(data, "goal", "objective")),
            ("Level", resolve_text(data, "experienceLevel", "level", "difficulty")),
            ("Duration", _duration(data)),
            ("Frequency", _frequency(data)),
            ("Equipment", to_display(resolve_list(data, "equipment"))),
        ]
    )
    if meta:
        sections.append(meta)

    schedule = _weeks_sections(data)
    # Weeks that render nothing leave the flat day list in charge
    sections.extend(schedule or _days_sections(data))

    sections.extend(
        prose_sections("Progression", first_present(data, "progression", "progressionNotes"))
    )
    sections.extend(prose_sections("Notes", first_present(data, "notes", "tips")))

    disclaimer = first_present(data, "disclaimer")
    if is_present(disclaimer):
        sections.append(Text(text=to_display(disclaimer)))

    return sections


def _weeks_sections(data: Mapping[str, Any]) -> list[Section]:
    sections: list[Section] = []
    weeks = [week for week in resolve_list(data, "weeks") if isinstance(week, Mapping)]
    for index, week in enumerate(weeks, start=1):
        week_sections = _days_sections(week)
        if not week_sections:
            continue
        sections.append(Heading(text=_week_label(week, index)))
        sections.extend(week_sections)
    return sections


def _days_sections(container: Mapping[str, Any]) -> list[Section]:
    sections: list[Section] = []
    days = resolve_list(container, *DAY_KEYS)
    for index, day in enumerate(days, start=1):
        if isinstance(day, Mapping):
            body = _day_body(day)
            if body:
                sections.append(Heading(text=_day_label(day, index)))
                sections.extend(body)
        else:
            # A bare string names a session with no further detail
            sections.append(Heading(text=f"Day {index}"))
            sections.append(Text(text=to_display(day)))
    return sections


def _day_body(day: Mapping[str, Any]) -> list[Section]:
    body: list[Section] = []

    warmup = first_present(day, "warmup", "warmUp", "warm_up")
    if is_present(warmup):
        body.append(Text(text=f"Warm-up: {to_display(warmup)}"))

    body.extend(
        group_body(first_present(day, "exercises", "movements", "drills"), EXERCISE_COLUMNS)
    )

    cooldown = first_present(day, "cooldown", "coolDown", "cool_down")
    if is_present(cooldown):
        body.append(Text(text=f"Cool-down: {to_display(cooldown)}"))

    duration = first_present(day, "estimatedDuration", "duration")
    if body and is_present(duration):
        body.append(Text(text=f"Duration: {to_display(duration)}"))

    notes = first_present(day, "notes")
    if is_present(notes):
        body.append(Text(text=to_display(notes)))
    return body


def _day_label(day: Mapping[str, Any], index: int) -> str:
    name = resolve_text(day, "name", "title", "day", "label")
    number = first_present(day, "dayNumber")
    if number is not None:
        prefix = f"Day {format_number(number)}"
        return prefix if name == PLACEHOLDER else f"{prefix}: {name}"
    return f"Day {index}" if name == PLACEHOLDER else name


def _week_label(week: Mapping[str, Any], index: int) -> str:
    number = first_present(week, "weekNumber", "week")
    label = f"Week {format_number(number) if number is not None else index}"
    focus = resolve_text(week, "focus", "theme", "name")
    return label if focus == PLACEHOLDER else f"{label}: {focus}"


def _duration(data: Mapping[str, Any]) -> str:
    duration = first_present(data, "duration")
    if duration is not None:
        return to_display(duration)
    weeks = first_present(data, "durationWeeks")
    if weeks is not None:
        return f"{format_number(weeks)} weeks"
    return PLACEHOLDER


def _frequency(data: Mapping[str, Any]) -> str:
    frequency = first_present(data, "frequency")
    if frequency is not None:
        return to_display(frequency)
    per_week = first_present(data, "daysPerWeek", "sessionsPerWeek")
    if per_week is not None:
        return f"{format_number(per_week)} days/week"
    return PLACEHOLDER
