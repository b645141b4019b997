"""Data models for MEPS."""

from meps.models.findings import (
    AllergyAlert,
    Contraindication,
    DosageCalculation,
    DrugInteraction,
)
from meps.models.medication import Medication, MedicationOption
from meps.models.patient import PatientInfo
from meps.models.report import SafetyReport
from meps.models.rules import AllergyRule, DosageRule, InteractionRule

__all__ = [
    "AllergyAlert",
    "AllergyRule",
    "Contraindication",
    "DosageCalculation",
    "DosageRule",
    "DrugInteraction",
    "InteractionRule",
    "Medication",
    "MedicationOption",
    "PatientInfo",
    "SafetyReport",
]
