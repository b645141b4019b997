"""Patient profile model."""

from enum import Enum

from pydantic import Field

from meps.models.base import CamelModel


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class PregnancyStatus(str, Enum):
    PREGNANT = "pregnant"
    BREASTFEEDING = "breastfeeding"
    NONE = "none"


class PatientInfo(CamelModel):
    """The patient for the current session.

    Allergies and medical conditions are free text. Use ``add_allergy`` and
    ``add_condition`` to keep them free of case-insensitive duplicates.
    """

    age: int = Field(0, ge=0)  # years
    weight: float = 0.0  # kg
    height: float = Field(0.0, ge=0)  # cm
    gender: Gender = Gender.OTHER
    allergies: list[str] = []
    medical_conditions: list[str] = []
    pregnancy_status: PregnancyStatus = PregnancyStatus.NONE

    def add_allergy(self, allergy: str) -> bool:
        """Append an allergy unless already present. Returns True if added."""
        return _add_unique(self.allergies, allergy)

    def add_condition(self, condition: str) -> bool:
        """Append a medical condition unless already present. Returns True if added."""
        return _add_unique(self.medical_conditions, condition)


def _add_unique(entries: list[str], text: str) -> bool:
    text = text.strip()
    if not text:
        return False
    if any(existing.lower() == text.lower() for existing in entries):
        return False
    entries.append(text)
    return True
