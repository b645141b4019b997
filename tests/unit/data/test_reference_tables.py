"""Sanity checks on the static reference tables."""

from meps.data.allergies import ALLERGY_RULES
from meps.data.catalog import MEDICATION_CATALOG
from meps.data.contraindications import CONTRAINDICATIONS
from meps.data.dosage import DOSAGE_RULES
from meps.data.interactions import INTERACTION_RULES


def test_table_sizes():
    assert len(INTERACTION_RULES) == 12
    assert len(ALLERGY_RULES) == 13
    assert len(CONTRAINDICATIONS) == 15
    assert len(DOSAGE_RULES) == 5
    assert len(MEDICATION_CATALOG) == 20


def test_interaction_terms_are_lowercase():
    for rule in INTERACTION_RULES:
        assert all(term == term.lower() for term in rule.medications)
        assert len(rule.medications) >= 2


def test_interaction_ids_unique():
    ids = [rule.rule_id for rule in INTERACTION_RULES]
    assert len(ids) == len(set(ids))


def test_contraindication_ids_unique():
    ids = [c.id for c in CONTRAINDICATIONS]
    assert len(ids) == len(set(ids))


def test_one_rule_per_medication_condition_pair():
    pairs = [(c.medication, c.condition) for c in CONTRAINDICATIONS]
    assert len(pairs) == len(set(pairs))


def test_allergy_terms_are_lowercase():
    for rule in ALLERGY_RULES:
        assert rule.allergen == rule.allergen.lower()
        assert all(t == t.lower() for t in rule.cross_reactive)


def test_dosage_rules_have_positive_doses():
    for rule in DOSAGE_RULES:
        assert rule.base_dose > 0
        assert rule.max_daily_dose >= rule.base_dose
