"""
Reference-table row models.

Rows are frozen; the tables in ``meps.data`` are module-level tuples built
once at import time.
"""

from enum import Enum

from meps.models.base import ReferenceModel


class InteractionSeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CONTRAINDICATED = "contraindicated"


class EvidenceTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class AllergySeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    LIFE_THREATENING = "life-threatening"


class ContraindicationSeverity(str, Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class InteractionRule(ReferenceModel):
    """A known interaction between two or more drugs."""

    medications: tuple[str, ...]  # lowercase name fragments, all required
    severity: InteractionSeverity
    description: str
    clinical_effect: str
    management: str
    evidence: EvidenceTier
    references: tuple[str, ...]

    @property
    def rule_id(self) -> str:
        return "interaction-" + "-".join(self.medications)


class AllergyRule(ReferenceModel):
    """An allergen and the substances that cross-react with it."""

    allergen: str
    cross_reactive: tuple[str, ...]
    severity: AllergySeverity
    reaction: str
    alternatives: tuple[str, ...]
    action: str


class DosageRule(ReferenceModel):
    """Dosing parameters for one medication."""

    medication: str  # lowercase name fragment
    base_dose: float
    unit: str
    max_daily_dose: float
    weight_based: bool
    age_adjustment: bool
    renal_adjustment: bool
    hepatic_adjustment: bool
    warnings: tuple[str, ...]
    contraindications: tuple[str, ...]  # condition names
