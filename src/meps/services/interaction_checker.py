"""Drug-drug interaction checking."""

import logging

from meps.data.interactions import INTERACTION_RULES
from meps.models.findings import DrugInteraction
from meps.models.medication import Medication
from meps.models.rules import EvidenceTier, InteractionSeverity

logger = logging.getLogger(__name__)

GENERIC_INTERACTION_ID = "generic-interaction"

SEVERITY_RANK: dict[InteractionSeverity, int] = {
    InteractionSeverity.CONTRAINDICATED: 4,
    InteractionSeverity.MAJOR: 3,
    InteractionSeverity.MODERATE: 2,
    InteractionSeverity.MINOR: 1,
}


def check_interactions(medications: list[Medication]) -> list[DrugInteraction]:
    """Return every interaction rule matched by the medication list.

    A rule fires when each of its name fragments appears in at least one
    medication name (case-insensitive). Findings follow rule-table order.
    When nothing fires and there are two or more medications, a single
    low-confidence generic finding for the first two is returned instead.
    """
    names = [med.name.lower() for med in medications]
    interactions: list[DrugInteraction] = []

    for rule in INTERACTION_RULES:
        if all(any(fragment in name for name in names) for fragment in rule.medications):
            logger.debug("Interaction rule matched: %s", rule.rule_id)
            interactions.append(
                DrugInteraction(
                    id=rule.rule_id,
                    severity=rule.severity,
                    description=rule.description,
                    clinical_effect=rule.clinical_effect,
                    management=rule.management,
                    evidence=rule.evidence,
                    references=list(rule.references),
                )
            )

    if not interactions and len(medications) >= 2:
        first, second = medications[0], medications[1]
        interactions.append(
            DrugInteraction(
                id=GENERIC_INTERACTION_ID,
                severity=InteractionSeverity.MINOR,
                description=f"{first.name} and {second.name}",
                clinical_effect="Potential interaction - consult pharmacist or physician",
                management="Monitor for unusual side effects, consider timing of doses",
                evidence=EvidenceTier.POOR,
                references=["General Drug Interaction Guidelines"],
            )
        )

    return interactions


def sort_by_severity(interactions: list[DrugInteraction]) -> list[DrugInteraction]:
    """Most severe first; ties keep their original order."""
    return sorted(interactions, key=lambda i: SEVERITY_RANK[i.severity], reverse=True)
