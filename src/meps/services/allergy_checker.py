"""Allergy and cross-reactivity checking."""

import logging

from meps.data.allergies import ALLERGY_RULES, COMMON_ALLERGIES
from meps.helpers.matching import fuzzy_match, fuzzy_match_any
from meps.models.findings import AllergyAlert
from meps.models.medication import Medication
from meps.models.patient import PatientInfo
from meps.models.rules import AllergyRule, AllergySeverity

logger = logging.getLogger(__name__)

SEVERITY_RANK: dict[AllergySeverity, int] = {
    AllergySeverity.LIFE_THREATENING: 4,
    AllergySeverity.SEVERE: 3,
    AllergySeverity.MODERATE: 2,
    AllergySeverity.MILD: 1,
}


def _rule_terms(rule: AllergyRule) -> tuple[str, ...]:
    return (rule.allergen, *rule.cross_reactive)


def check_allergies(
    medications: list[Medication], patient: PatientInfo
) -> list[AllergyAlert]:
    """Return one alert per (medication, patient allergy, matching rule).

    A rule applies to an allergy when the allergy text loosely matches the
    rule's allergen or any of its cross-reactive substances; it flags a
    medication when the medication's name or generic name loosely matches
    one of those same terms. Overlapping rules produce separate alerts.
    """
    alerts: list[AllergyAlert] = []
    if not patient.allergies:
        return alerts

    for medication in medications:
        med_names = (medication.name, medication.generic_name)
        for allergy in patient.allergies:
            for rule in ALLERGY_RULES:
                terms = _rule_terms(rule)
                if not fuzzy_match_any(allergy, terms):
                    continue
                if not any(fuzzy_match(name, term) for name in med_names for term in terms):
                    continue
                logger.debug(
                    "Allergy alert: %s vs '%s' (rule %s)",
                    medication.name,
                    allergy,
                    rule.allergen,
                )
                alerts.append(
                    AllergyAlert(
                        medication=medication.name,
                        allergen=allergy,
                        severity=rule.severity,
                        reaction=rule.reaction,
                        alternative=", ".join(rule.alternatives),
                        action=rule.action,
                    )
                )

    return alerts


def sort_by_severity(alerts: list[AllergyAlert]) -> list[AllergyAlert]:
    """Most severe first; ties keep their original order."""
    return sorted(alerts, key=lambda a: SEVERITY_RANK[a.severity], reverse=True)


def common_allergies() -> list[str]:
    """Frequently reported allergens offered as quick picks."""
    return list(COMMON_ALLERGIES)
