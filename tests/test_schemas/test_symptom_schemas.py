"""
Tests for intake and analysis schemas.
"""

import json

import pytest
from pydantic import ValidationError

from symptom_checker.schemas.symptoms import (
    AnalysisResult,
    CarePlanType,
    ConsentAgreement,
    PatientInput,
    UrgencyLevel,
)

REQUIRED = ["age", "gender", "severity", "description", "duration"]


@pytest.mark.parametrize("field", REQUIRED)
def test_any_empty_required_field_blocks_submission(patient_input: PatientInput, field: str):
    incomplete = patient_input.model_copy(update={field: ""})

    assert incomplete.is_complete is False
    assert incomplete.missing_fields() == [field]


def test_whitespace_counts_as_empty(patient_input: PatientInput):
    assert patient_input.model_copy(update={"description": "   "}).missing_fields() == ["description"]


def test_empty_history_does_not_block(patient_input: PatientInput):
    assert patient_input.history == ""
    assert patient_input.is_complete is True


def test_blank_input_lists_all_required_fields():
    assert PatientInput().missing_fields() == REQUIRED


def test_patient_input_is_frozen(patient_input: PatientInput):
    with pytest.raises(ValidationError):
        patient_input.age = "40"


def test_browser_numbers_and_nulls_are_accepted():
    patient = PatientInput.model_validate({
        "age": 35,
        "gender": "Female",
        "severity": "Mild",
        "description": "sore throat",
        "duration": "1-3 days",
        "history": None,
    })

    assert patient.age == "35"
    assert patient.history == ""
    assert patient.is_complete


def test_null_required_field_is_missing():
    patient = PatientInput.model_validate({"age": None, "gender": "Male"})

    assert "age" in patient.missing_fields()


@pytest.mark.parametrize("flags,expected", [
    ((True, True, True), True),
    ((True, True, False), False),
    ((False, True, True), False),
    ((False, False, False), False),
])
def test_consent_requires_all_agreements(flags, expected):
    agreement = ConsentAgreement(
        medical_disclaimer=flags[0],
        privacy_policy=flags[1],
        age_verification=flags[2]
    )

    assert agreement.all_consented is expected


def test_analysis_parses_without_field_loss(sample_analysis: dict):
    """A schema-conformant payload survives parsing intact."""
    result = AnalysisResult.model_validate_json(json.dumps(sample_analysis))

    assert result.model_dump(mode="json") == sample_analysis
    assert result.urgency_level is UrgencyLevel.MEDIUM
    assert result.care_plan[1].type is CarePlanType.CAUTION


def test_analysis_accepts_fractional_numbers(sample_analysis: dict):
    sample_analysis["ai_confidence"] = 77.5
    sample_analysis["conditions"][0]["probability"] = 33.3

    result = AnalysisResult.model_validate(sample_analysis)

    assert result.ai_confidence == 77.5
    assert result.conditions[0].probability == 33.3


def test_analysis_accepts_empty_lists(sample_analysis: dict):
    for key in ("conditions", "risk_assessment", "care_plan", "timeline"):
        sample_analysis[key] = []

    result = AnalysisResult.model_validate(sample_analysis)

    assert result.sorted_by_probability().conditions == []


def test_sorted_by_probability_leaves_original(sample_analysis: dict):
    result = AnalysisResult.model_validate(sample_analysis)

    ordered = result.sorted_by_probability()

    assert [c.name for c in ordered.conditions] == ["Cold", "Flu"]
    assert [c.name for c in result.conditions] == ["Flu", "Cold"]


def test_unknown_urgency_rejected(sample_analysis: dict):
    sample_analysis["urgency_level"] = "Urgent"

    with pytest.raises(ValidationError):
        AnalysisResult.model_validate(sample_analysis)
