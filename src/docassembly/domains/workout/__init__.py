"""Workout program adapter."""

from __future__ import annotations

from docassembly.domains.workout.builder import build_workout_sections

__all__ = ["build_workout_sections"]
