"""Care plan adapter: healthcare care plan record -> section sequence."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docassembly.fields import (
    PLACEHOLDER,
    first_present,
    is_present,
    resolve_list,
    resolve_mapping,
    resolve_text,
    to_display,
)
from docassembly.sections import Heading, Section, Text
from docassembly.tables import Column, build_meta, group_sections, prose_sections

CONDITION_COLUMNS = (
    Column("Condition", ("name", "condition", "diagnosis")),
    Column("ICD Code", ("icdCode", "code", "icd10")),
    Column("Status", ("status",), default="active"),
    Column("Onset", ("onset", "onsetDate")),
)

GOAL_COLUMNS = (
    Column("Goal", ("description", "goal", "text")),
    Column("Target Date", ("targetDate", "deadline")),
    Column("Status", ("status",), default="in progress"),
    Column("Priority", ("priority",), default="medium"),
)

INTERVENTION_COLUMNS = (
    Column("Intervention", ("description", "intervention", "name")),
    Column("Frequency", ("frequency", "schedule")),
    Column("Responsible", ("responsible", "responsibleParty", "provider")),
    Column("Notes", ("notes",)),
)

MEDICATION_COLUMNS = (
    Column("Medication", ("drug", "name", "medication")),
    Column("Dose", ("dose", "dosage")),
    Column("Route", ("route",), default="oral"),
    Column("Frequency", ("frequency",)),
    Column("Notes", ("notes", "instructions")),
)

MILESTONE_COLUMNS = (
    Column("Milestone", ("description", "name", "milestone")),
    Column("Date", ("date", "targetDate")),
    Column("Status", ("status",), default="pending"),
)


def build_care_plan_sections(data: Mapping[str, Any]) -> list[Section]:
    """Build care plan sections from an artifact's data record."""
    sections: list[Section] = []
    context = resolve_mapping(data, "patientContext") or {}

    sections.extend(_patient_sections(data, context))

    conditions = first_present(data, "conditions", "diagnoses", "problems")
    if conditions is None:
        conditions = first_present(context, "conditions", "diagnoses")
    sections.extend(group_sections("Diagnoses / Conditions", conditions, CONDITION_COLUMNS))

    sections.extend(
        group_sections("Goals & Objectives", first_present(data, "goals", "objectives"), GOAL_COLUMNS)
    )
    sections.extend(
        group_sections(
            "Interventions",
            first_present(data, "interventions", "treatments", "actions"),
            INTERVENTION_COLUMNS,
        )
    )

    medications = first_present(data, "medications", "prescriptions")
    if medications is None:
        medications = first_present(context, "currentMedications", "medications")
    sections.extend(group_sections("Medications", medications, MEDICATION_COLUMNS))

    sections.extend(
        group_sections(
            "Milestones", first_present(data, "milestones", "checkpoints"), MILESTONE_COLUMNS
        )
    )

    sections.extend(prose_sections("Follow-up", first_present(data, "followUp", "nextSteps")))
    sections.extend(prose_sections("Clinical Notes", first_present(data, "notes", "clinicalNotes")))

    disclaimer = first_present(data, "disclaimer")
    if is_present(disclaimer):
        sections.append(Text(text=to_display(disclaimer)))

    return sections


def _patient_sections(data: Mapping[str, Any], context: Mapping[str, Any]) -> list[Section]:
    patient = resolve_mapping(data, "patient", "patientInfo") or {}
    name = resolve_text(patient, "name", "fullName")
    mrn = resolve_text(patient, "id", "mrn")
    if name == PLACEHOLDER and mrn == PLACEHOLDER:
        return []

    allergies = resolve_list(patient, "allergies") or resolve_list(context, "allergies")
    meta = build_meta(
        [
            ("Name", name),
            ("MRN", mrn),
            ("DOB", resolve_text(patient, "dob", "dateOfBirth")),
            ("Age", resolve_text(patient, "age")),
            ("Gender", resolve_text(patient, "gender", "sex")),
            ("Allergies", to_display(allergies)),
        ]
    )
    return [Heading(text="Patient Information"), meta] if meta else []
