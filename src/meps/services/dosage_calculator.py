"""
Dose estimation.

The estimate starts from the medication's dosing rule (or its strength) and
applies, in order, weight, age and renal factors before rounding to one
decimal. Warnings and adjustments are appended in the order the steps run.
"""

import logging
import math

from meps.constants import (
    ASSUMED_SERUM_CREATININE,
    DEFAULT_BASE_DOSE,
    ELDERLY_AGE,
    ELDERLY_FACTOR,
    FALLBACK_MAX_DAILY_MULTIPLIER,
    FEMALE_CRCL_FACTOR,
    MODERATE_RENAL_CRCL,
    MODERATE_RENAL_FACTOR,
    PEDIATRIC_AGE,
    PEDIATRIC_FACTOR,
    REFERENCE_WEIGHT_KG,
    SEVERE_RENAL_CRCL,
    SEVERE_RENAL_FACTOR,
)
from meps.data.dosage import DOSAGE_RULES
from meps.helpers.matching import fuzzy_match, fuzzy_match_any
from meps.models.findings import DosageCalculation
from meps.models.medication import Medication
from meps.models.patient import Gender, PatientInfo, PregnancyStatus
from meps.models.rules import DosageRule

logger = logging.getLogger(__name__)

DEFAULT_WARNING = "Monitor for side effects"
DEFAULT_ADJUSTMENT = "Consider individual patient factors"


def find_dosage_rule(medication_name: str) -> DosageRule | None:
    """First rule whose medication key appears in the name (case-insensitive)."""
    name = medication_name.lower()
    return next((r for r in DOSAGE_RULES if r.medication.lower() in name), None)


def estimate_creatinine_clearance(patient: PatientInfo) -> float:
    """Cockcroft-Gault estimate (mL/min) assuming a normal serum creatinine."""
    gender_factor = 1.0 if patient.gender == Gender.MALE else FEMALE_CRCL_FACTOR
    return ((140 - patient.age) * patient.weight * gender_factor) / (
        72 * ASSUMED_SERUM_CREATININE
    )


def round_dose(dose: float) -> float:
    """Round to one decimal place, halves rounding up."""
    return math.floor(dose * 10 + 0.5) / 10


def has_contraindication(patient: PatientInfo, contraindication: str) -> bool:
    return fuzzy_match_any(contraindication, patient.medical_conditions)


def has_allergy(patient: PatientInfo, medication: Medication) -> bool:
    med_names = (medication.name, medication.generic_name)
    return any(
        fuzzy_match(allergy, name) for allergy in patient.allergies for name in med_names
    )


def calculate_dosage(medication: Medication, patient: PatientInfo) -> DosageCalculation:
    """Estimate an adjusted dose for one medication and patient.

    Pure: identical inputs always give an identical result. Patients with no
    recorded weight (``weight <= 0``) skip the weight and renal steps.
    """
    rule = find_dosage_rule(medication.name)
    warnings: list[str] = []
    adjustments: list[str] = []

    if rule is not None:
        dose = rule.base_dose
    elif medication.strength is not None and medication.strength > 0:
        dose = medication.strength
    else:
        dose = DEFAULT_BASE_DOSE

    if rule is not None and rule.weight_based and patient.weight > 0:
        dose = dose * (patient.weight / REFERENCE_WEIGHT_KG)
        adjustments.append("Dose adjusted for patient weight")

    if rule is not None and rule.age_adjustment:
        if patient.age > ELDERLY_AGE:
            dose = dose * ELDERLY_FACTOR
            adjustments.append("Reduced dose for elderly patient")
            warnings.append("Monitor for increased sensitivity in elderly")
        elif patient.age < PEDIATRIC_AGE:
            dose = dose * PEDIATRIC_FACTOR
            adjustments.append("Pediatric dosing adjustment")
            warnings.append("Pediatric dosing - monitor closely")

    if rule is not None and rule.renal_adjustment and patient.weight > 0:
        crcl = estimate_creatinine_clearance(patient)
        logger.debug("Estimated CrCl for %s: %.1f", medication.name, crcl)
        if crcl < SEVERE_RENAL_CRCL:
            dose = dose * SEVERE_RENAL_FACTOR
            adjustments.append("Reduced dose for renal impairment")
            warnings.append("Severe renal impairment - monitor kidney function")
        elif crcl < MODERATE_RENAL_CRCL:
            dose = dose * MODERATE_RENAL_FACTOR
            adjustments.append("Moderate dose reduction for renal function")
            warnings.append("Moderate renal impairment - monitor kidney function")

    dose = round_dose(dose)

    if rule is not None:
        warnings.extend(rule.warnings)
        for contraindication in rule.contraindications:
            if has_contraindication(patient, contraindication):
                warnings.append(f"WARNING: {contraindication} - consider alternative")

    if patient.pregnancy_status == PregnancyStatus.PREGNANT:
        warnings.append("Pregnancy - consult obstetrician")
        adjustments.append("Consider pregnancy-safe alternatives")
    elif patient.pregnancy_status == PregnancyStatus.BREASTFEEDING:
        warnings.append("Breastfeeding - consider infant safety")
        adjustments.append("Monitor infant for side effects")

    if has_allergy(patient, medication):
        warnings.append("ALLERGY ALERT - Do not administer")
        adjustments.append("Use alternative medication")

    return DosageCalculation(
        medication=medication,
        calculated_dose=dose,
        unit=rule.unit if rule is not None else medication.unit.value,
        frequency=medication.frequency,
        max_daily_dose=(
            rule.max_daily_dose
            if rule is not None
            else dose * FALLBACK_MAX_DAILY_MULTIPLIER
        ),
        warnings=warnings or [DEFAULT_WARNING],
        adjustments=adjustments or [DEFAULT_ADJUSTMENT],
    )
