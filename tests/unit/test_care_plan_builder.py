"""Tests for the care plan adapter."""

from __future__ import annotations

from docassembly.domains.care_plan import build_care_plan_sections
from docassembly.sections import Heading, ListSection, Meta, MetaField, Table, Text


def _after(sections, title):
    """Return the section that directly follows the heading *title*."""
    index = sections.index(Heading(text=title))
    return sections[index + 1]


class TestSynonymKeys:
    def test_conditions_and_diagnoses_render_identically(self) -> None:
        """Records naming the same fact differently produce the same sections."""
        first = build_care_plan_sections(
            {"conditions": [{"name": "Hypertension", "icdCode": "I10", "status": "active"}]}
        )
        second = build_care_plan_sections(
            {"diagnoses": [{"diagnosis": "Hypertension", "code": "I10"}]}
        )
        expected = [
            Heading(text="Diagnoses / Conditions"),
            Table(
                headers=("Condition", "ICD Code", "Status", "Onset"),
                rows=(("Hypertension", "I10", "active", "—"),),
            ),
        ]
        assert first == expected
        assert second == expected

    def test_responsible_party_synonym(self) -> None:
        sections = build_care_plan_sections(
            {"interventions": [{"intervention": "Walk daily", "responsibleParty": "Patient"}]}
        )
        table = _after(sections, "Interventions")
        assert table.rows == (("Walk daily", "—", "Patient", "—"),)


class TestPatientBlock:
    def test_emitted_with_name(self) -> None:
        sections = build_care_plan_sections({"patient": {"name": "Jane Doe", "age": 54}})
        assert sections == [
            Heading(text="Patient Information"),
            Meta(fields=[MetaField("Name", "Jane Doe"), MetaField("Age", "54")]),
        ]

    def test_omitted_without_name_or_id(self) -> None:
        assert build_care_plan_sections({"patient": {"age": 54}}) == []

    def test_allergies_fall_back_to_context(self) -> None:
        sections = build_care_plan_sections(
            {"patient": {"mrn": "M-1"}, "patientContext": {"allergies": ["Penicillin", "Latex"]}}
        )
        meta = sections[1]
        assert MetaField("MRN", "M-1") in meta.fields
        assert MetaField("Allergies", "Penicillin, Latex") in meta.fields


class TestGroups:
    def test_goal_defaults(self) -> None:
        table = _after(build_care_plan_sections({"goals": [{"goal": "Lose weight"}]}), "Goals & Objectives")
        assert table.rows == (("Lose weight", "—", "in progress", "medium"),)

    def test_plain_string_goals_are_a_list(self) -> None:
        sections = build_care_plan_sections({"goals": ["Sleep 8h", "Walk daily"]})
        assert sections == [
            Heading(text="Goals & Objectives"),
            ListSection(items=["Sleep 8h", "Walk daily"]),
        ]

    def test_medication_route_default(self) -> None:
        table = _after(
            build_care_plan_sections({"medications": [{"drug": "Metformin", "dose": "500mg"}]}),
            "Medications",
        )
        assert table.headers == ("Medication", "Dose", "Route", "Frequency", "Notes")
        assert table.rows == (("Metformin", "500mg", "oral", "—", "—"),)

    def test_medications_fall_back_to_context(self) -> None:
        sections = build_care_plan_sections(
            {"patientContext": {"currentMedications": ["Lisinopril 10mg"]}}
        )
        assert _after(sections, "Medications") == ListSection(items=["Lisinopril 10mg"])

    def test_top_level_wins_over_context(self) -> None:
        sections = build_care_plan_sections(
            {"conditions": ["asthma"], "patientContext": {"conditions": ["gout"]}}
        )
        assert _after(sections, "Diagnoses / Conditions") == ListSection(items=["asthma"])

    def test_empty_groups_are_omitted(self) -> None:
        sections = build_care_plan_sections({"goals": [], "milestones": None, "medications": [""]})
        assert sections == []

    def test_milestone_status_default(self) -> None:
        table = _after(
            build_care_plan_sections({"milestones": [{"milestone": "A1c < 7", "date": "June"}]}),
            "Milestones",
        )
        assert table.rows == (("A1c < 7", "June", "pending"),)


class TestProse:
    def test_follow_up_mapping_becomes_meta(self) -> None:
        sections = build_care_plan_sections({"followUp": {"nextAppointment": "2026-04-15"}})
        assert sections == [
            Heading(text="Follow-up"),
            Meta(fields=[MetaField("Next Appointment", "2026-04-15")]),
        ]

    def test_notes_and_disclaimer_order(self) -> None:
        sections = build_care_plan_sections({"notes": "Review in 3 months", "disclaimer": "Not advice."})
        assert sections == [
            Heading(text="Clinical Notes"),
            Text(text="Review in 3 months"),
            Text(text="Not advice."),
        ]


class TestExemplar:
    def test_section_order(self, exemplars) -> None:
        sections = build_care_plan_sections(exemplars["care_plan"])
        headings = [s.text for s in sections if isinstance(s, Heading)]
        assert headings == [
            "Patient Information",
            "Diagnoses / Conditions",
            "Goals & Objectives",
            "Interventions",
            "Medications",
            "Follow-up",
        ]
        assert isinstance(sections[-1], Text)

    def test_goal_priority_default_on_third_goal(self, exemplars) -> None:
        table = _after(build_care_plan_sections(exemplars["care_plan"]), "Goals & Objectives")
        assert table.rows[0] == ("Achieve glycemic control", "2026-08-01", "in progress", "high")
        assert table.rows[2][3] == "medium"
