"""Workout domain manifest, discovered by DomainRegistry.auto_discover()."""

from __future__ import annotations

from docassembly.domains.registry import DomainConfig

domain = DomainConfig(
    name="workout",
    display_name="Workout Program",
    description="Training program: weeks, sessions and exercise prescriptions",
    routes=(
        ("fitness", "build-program"),
        ("fitness", "generate-program"),
    ),
    builder="docassembly.domains.workout.builder:build_workout_sections",
    exemplar="docassembly.domains.workout.exemplar:EXEMPLAR",
    default_title="Workout Program",
    filename_prefix="workout",
    aliases=("workout-program", "workout_program"),
)
