"""Reference workout program record, as produced upstream for ``fitness/build-program``."""

from __future__ import annotations

from typing import Any

EXEMPLAR: dict[str, Any] = {
    "title": "12-Week Beginner Strength Foundation",
    "goal": "strength",
    "durationWeeks": 12,
    "daysPerWeek": 3,
    "experienceLevel": "beginner",
    "weeks": [
        {
            "weekNumber": 1,
            "focus": "Movement patterns and form",
            "days": [
                {
                    "dayNumber": 1,
                    "name": "Full Body A",
                    "warmup": "5 min light cardio, 10 bodyweight squats, 10 arm circles",
                    "exercises": [
                        {"name": "Goblet squat", "sets": 3, "reps": "10", "rest": "90 seconds",
                         "notes": "Focus on depth and knee tracking"},
                        {"name": "Dumbbell bench press", "sets": 3, "reps": "10",
                         "rest": "90 seconds", "notes": "Control the descent"},
                        {"name": "Dumbbell row", "sets": 3, "reps": "10 each arm",
                         "rest": "60 seconds", "notes": "Squeeze at the top"},
                        {"name": "Plank", "sets": 3, "reps": "30 seconds", "rest": "60 seconds",
                         "notes": "Keep hips level"},
                    ],
                    "cooldown": "5 min walking, hamstring and quad stretches",
                    "estimatedDuration": "45 minutes",
                },
            ],
        },
    ],
}
