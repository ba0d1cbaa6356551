"""Reference care plan record, as produced upstream for ``healthcare/build-care-plan``."""

from __future__ import annotations

from typing import Any

EXEMPLAR: dict[str, Any] = {
    "title": "Type 2 Diabetes Management Care Plan",
    "patient": {
        "name": "Maria Alvarez",
        "mrn": "MRN-448120",
        "dob": "1968-04-09",
        "gender": "female",
    },
    "patientContext": {
        "conditions": ["type 2 diabetes", "hypertension"],
        "currentMedications": ["Metformin 500mg twice daily", "Lisinopril 10mg daily"],
        "allergies": ["Sulfa drugs"],
    },
    "goals": [
        {
            "goal": "Achieve glycemic control",
            "targetDate": "2026-08-01",
            "measurable": "HbA1c below 7.0%",
            "priority": "high",
        },
        {
            "goal": "Blood pressure management",
            "targetDate": "2026-06-01",
            "measurable": "Consistently below 130/80 mmHg",
            "priority": "high",
        },
        {
            "goal": "Weight management",
            "targetDate": "2026-12-01",
            "measurable": "5% body weight reduction",
        },
    ],
    "interventions": [
        {
            "intervention": "Blood glucose monitoring",
            "frequency": "Twice daily (fasting and post-meal)",
            "responsibleParty": "Patient",
            "notes": "Log readings in glucose journal",
        },
        {
            "intervention": "Dietary counseling, Mediterranean diet focus",
            "frequency": "Monthly sessions",
            "responsibleParty": "Registered Dietitian",
            "notes": "Emphasize low glycemic index foods, portion control",
        },
    ],
    "followUp": {
        "nextAppointment": "2026-04-15",
        "monitoringSchedule": "HbA1c every 3 months, metabolic panel every 6 months",
    },
    "disclaimer": (
        "This care plan is generated for informational purposes only and does not "
        "constitute medical advice."
    ),
}
