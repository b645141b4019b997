"""Run every check for a medication list and patient."""

import logging

from meps.models.medication import Medication
from meps.models.patient import PatientInfo
from meps.models.report import SafetyReport
from meps.services.allergy_checker import check_allergies
from meps.services.contraindication_checker import (
    calculate_risk_score,
    check_contraindications,
    get_monitoring_recommendations,
    get_risk_level,
)
from meps.services.dosage_calculator import calculate_dosage
from meps.services.interaction_checker import check_interactions

logger = logging.getLogger(__name__)


def run_safety_check(
    medications: list[Medication], patient: PatientInfo
) -> SafetyReport:
    """Run the four checkers independently and bundle the results."""
    interactions = check_interactions(medications)
    allergy_alerts = check_allergies(medications, patient)
    contraindications = check_contraindications(medications, patient)
    dosage_calculations = [calculate_dosage(med, patient) for med in medications]

    risk_score = calculate_risk_score(contraindications)

    logger.info(
        "Safety check: %d medications, %d interactions, %d allergy alerts, "
        "%d contraindications",
        len(medications),
        len(interactions),
        len(allergy_alerts),
        len(contraindications),
    )

    return SafetyReport(
        patient=patient,
        medications=medications,
        interactions=interactions,
        allergy_alerts=allergy_alerts,
        contraindications=contraindications,
        dosage_calculations=dosage_calculations,
        risk_score=risk_score,
        risk_level=get_risk_level(risk_score),
        monitoring=get_monitoring_recommendations(contraindications),
    )
