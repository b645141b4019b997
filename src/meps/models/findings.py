"""
Result records produced by the checkers.

Findings are created fresh on every check and carry copies of the rule
text, so callers may keep or serialise them freely.
"""

from meps.models.base import CamelModel, ReferenceModel
from meps.models.medication import Medication
from meps.models.rules import (
    AllergySeverity,
    ContraindicationSeverity,
    EvidenceTier,
    InteractionSeverity,
)


class DrugInteraction(CamelModel):
    """An interaction found in a medication list."""

    id: str
    severity: InteractionSeverity
    description: str
    clinical_effect: str
    management: str
    evidence: EvidenceTier
    references: list[str] = []


class AllergyAlert(CamelModel):
    """A medication that matches (or cross-reacts with) a patient allergy."""

    medication: str  # medication display name
    allergen: str  # the patient's allergy text, as entered
    severity: AllergySeverity
    reaction: str
    alternative: str  # comma-separated alternatives
    action: str


class Contraindication(ReferenceModel):
    """A condition under which a medication should not be given.

    Used both as the reference-table row and as the finding returned when
    the condition is present in the patient.
    """

    id: str
    medication: str  # exact, case-sensitive medication name
    condition: str
    severity: ContraindicationSeverity
    description: str
    alternative: str
    monitoring: tuple[str, ...] = ()


class DosageCalculation(CamelModel):
    """Adjusted dose estimate for one medication."""

    medication: Medication
    calculated_dose: float
    unit: str
    frequency: str
    max_daily_dose: float
    warnings: list[str] = []
    adjustments: list[str] = []
