"""Pytest configuration and fixtures."""

import pytest

from meps.models.medication import Medication
from meps.models.patient import PatientInfo


@pytest.fixture
def make_medication():
    """Factory for Medication records; generic name defaults to the brand name."""

    def _make(name: str, generic_name: str | None = None, **kwargs) -> Medication:
        return Medication(
            name=name,
            generic_name=generic_name if generic_name is not None else name,
            **kwargs,
        )

    return _make


@pytest.fixture
def adult_patient() -> PatientInfo:
    """Healthy 40-year-old male at reference weight, no allergies or conditions."""
    return PatientInfo(age=40, weight=70.0, height=175.0, gender="male")


@pytest.fixture
def sample_patient_data() -> dict:
    """Patient record as persisted (camelCase keys)."""
    return {
        "age": 72,
        "weight": 58.5,
        "height": 160.0,
        "gender": "female",
        "allergies": ["Penicillin", "Latex"],
        "medicalConditions": ["Atrial fibrillation", "Chronic kidney disease"],
        "pregnancyStatus": "none",
    }
