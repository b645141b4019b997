"""Safety report model."""

from datetime import datetime

from pydantic import Field

from meps.models.base import CamelModel
from meps.models.findings import (
    AllergyAlert,
    Contraindication,
    DosageCalculation,
    DrugInteraction,
)
from meps.models.medication import Medication
from meps.models.patient import PatientInfo


class SafetyReport(CamelModel):
    """All check results for one medication list and patient."""

    patient: PatientInfo
    medications: list[Medication] = []
    interactions: list[DrugInteraction] = []
    allergy_alerts: list[AllergyAlert] = []
    contraindications: list[Contraindication] = []
    dosage_calculations: list[DosageCalculation] = []
    risk_score: int = 0
    risk_level: str = ""
    monitoring: list[str] = []
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_alerts(self) -> bool:
        return bool(self.interactions or self.allergy_alerts or self.contraindications)
