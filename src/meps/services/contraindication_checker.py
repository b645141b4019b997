"""
Drug-condition contraindication checking.

Medication names are compared by exact, case-sensitive equality with the
rule's medication ("Warfarin" matches, "warfarin" does not). Conditions are
matched loosely: word overlap against the patient's conditions and
allergies, then a handful of keyword rules (pregnancy, renal, liver,
asthma, bleeding, seizure, heart failure).
"""

import logging

from meps.constants import (
    ABSOLUTE_RISK_POINTS,
    CONDITION_KEYWORDS,
    MAX_RISK_SCORE,
    MINIMAL_RISK_LEVEL,
    RELATIVE_RISK_POINTS,
    RISK_LEVELS,
)
from meps.data.contraindications import CONTRAINDICATIONS
from meps.helpers.matching import contains_any, words_overlap
from meps.models.findings import Contraindication
from meps.models.medication import Medication
from meps.models.patient import PatientInfo, PregnancyStatus
from meps.models.rules import ContraindicationSeverity

logger = logging.getLogger(__name__)


def is_condition_present(condition: str, patient: PatientInfo) -> bool:
    """Decide whether a rule's condition phrase applies to the patient."""
    condition = condition.lower()

    if any(words_overlap(condition, c) for c in patient.medical_conditions):
        return True
    if any(words_overlap(condition, a) for a in patient.allergies):
        return True

    if "pregnancy" in condition and patient.pregnancy_status == PregnancyStatus.PREGNANT:
        return True

    # First keyword group present in the phrase decides the outcome.
    for keywords, patient_terms in CONDITION_KEYWORDS:
        if any(k in condition for k in keywords):
            return contains_any(patient.medical_conditions, patient_terms)

    return False


def check_contraindications(
    medications: list[Medication], patient: PatientInfo
) -> list[Contraindication]:
    """Return the contraindications whose condition is present in the patient.

    Ordered by medication (input order), then rule-table order.
    """
    found: list[Contraindication] = []
    for medication in medications:
        for rule in CONTRAINDICATIONS:
            if rule.medication != medication.name:
                continue
            if is_condition_present(rule.condition, patient):
                logger.debug("Contraindication found: %s", rule.id)
                found.append(rule.model_copy())
    return found


def check_drug_disease_interactions(
    medications: list[Medication], patient: PatientInfo
) -> list[Contraindication]:
    """Drug-disease view of the same check; identical to check_contraindications."""
    found: list[Contraindication] = []
    for medication in medications:
        for rule in get_contraindications_for_medication(medication.name):
            if is_condition_present(rule.condition, patient):
                found.append(rule)
    return found


def get_contraindications_for_medication(medication_name: str) -> list[Contraindication]:
    return [c.model_copy() for c in CONTRAINDICATIONS if c.medication == medication_name]


def get_all_contraindications() -> list[Contraindication]:
    return [c.model_copy() for c in CONTRAINDICATIONS]


def get_contraindications_by_severity(
    medications: list[Medication],
    patient: PatientInfo,
    severity: ContraindicationSeverity,
) -> list[Contraindication]:
    return [
        c for c in check_contraindications(medications, patient) if c.severity == severity
    ]


def check_pregnancy_contraindications(
    medications: list[Medication], patient: PatientInfo
) -> list[Contraindication]:
    """Pregnancy-related rules for the listed medications, if the patient is pregnant."""
    if patient.pregnancy_status != PregnancyStatus.PREGNANT:
        return []

    found: list[Contraindication] = []
    for medication in medications:
        found.extend(
            c
            for c in get_contraindications_for_medication(medication.name)
            if "pregnancy" in c.condition.lower()
        )
    return found


def get_monitoring_recommendations(
    contraindications: list[Contraindication],
) -> list[str]:
    """All monitoring items, de-duplicated, in first-seen order."""
    return list(dict.fromkeys(m for c in contraindications for m in c.monitoring))


def get_alternative_medications(contraindications: list[Contraindication]) -> list[str]:
    return [c.alternative for c in contraindications if c.alternative]


def calculate_risk_score(contraindications: list[Contraindication]) -> int:
    """10 points per absolute and 5 per relative contraindication, capped at 100."""
    score = 0
    for c in contraindications:
        if c.severity == ContraindicationSeverity.ABSOLUTE:
            score += ABSOLUTE_RISK_POINTS
        elif c.severity == ContraindicationSeverity.RELATIVE:
            score += RELATIVE_RISK_POINTS
    return min(score, MAX_RISK_SCORE)


def get_risk_level(score: int) -> str:
    for threshold, level in RISK_LEVELS:
        if score >= threshold:
            return level
    return MINIMAL_RISK_LEVEL
