"""Unit tests for services/contraindication_checker."""

import pytest

from meps.models.patient import PatientInfo
from meps.models.rules import ContraindicationSeverity
from meps.services.contraindication_checker import (
    calculate_risk_score,
    check_contraindications,
    check_drug_disease_interactions,
    check_pregnancy_contraindications,
    get_all_contraindications,
    get_alternative_medications,
    get_contraindications_by_severity,
    get_contraindications_for_medication,
    get_monitoring_recommendations,
    get_risk_level,
    is_condition_present,
)


def _by_id(*ids):
    table = {c.id: c for c in get_all_contraindications()}
    return [table[i] for i in ids]


class TestCheckContraindications:
    def test_warfarin_with_active_bleeding(self, make_medication):
        patient = PatientInfo(medical_conditions=["active bleeding"])
        result = check_contraindications([make_medication("Warfarin")], patient)

        assert [c.id for c in result] == ["warfarin-bleeding"]
        assert result[0].severity == ContraindicationSeverity.ABSOLUTE

    def test_medication_name_must_match_exactly(self, make_medication):
        patient = PatientInfo(medical_conditions=["active bleeding"])
        assert check_contraindications([make_medication("warfarin")], patient) == []

    def test_generic_name_is_not_used(self, make_medication):
        patient = PatientInfo(medical_conditions=["active bleeding"])
        med = make_medication("Coumadin", generic_name="Warfarin")
        assert check_contraindications([med], patient) == []

    def test_no_conditions_no_findings(self, make_medication, adult_patient):
        meds = [make_medication("Warfarin"), make_medication("Metformin")]
        assert check_contraindications(meds, adult_patient) == []

    def test_condition_matched_through_allergies(self, make_medication):
        patient = PatientInfo(allergies=["Penicillin"])
        result = check_contraindications([make_medication("Amoxicillin")], patient)
        assert [c.id for c in result] == ["amoxicillin-penicillin-allergy"]

    def test_ordered_by_medication_then_table(self, make_medication):
        patient = PatientInfo(
            medical_conditions=["Chronic kidney disease", "Congestive heart failure"]
        )
        meds = [make_medication("Ibuprofen"), make_medication("Metformin")]
        ids = [c.id for c in check_contraindications(meds, patient)]
        assert ids == [
            "ibuprofen-renal-severe",
            "metformin-renal-severe",
            "metformin-heart-failure",
        ]

    def test_drug_disease_view_matches(self, make_medication):
        patient = PatientInfo(medical_conditions=["Severe liver disease"])
        meds = [make_medication("Warfarin"), make_medication("Aspirin")]
        assert check_drug_disease_interactions(meds, patient) == check_contraindications(
            meds, patient
        )


class TestIsConditionPresent:
    def test_pregnancy_keyword(self):
        pregnant = PatientInfo(pregnancy_status="pregnant")
        assert is_condition_present("Pregnancy (2nd and 3rd trimester)", pregnant)

    def test_pregnancy_keyword_not_pregnant(self):
        breastfeeding = PatientInfo(pregnancy_status="breastfeeding")
        assert not is_condition_present("Pregnancy (2nd and 3rd trimester)", breastfeeding)

    @pytest.mark.parametrize(
        "rule_condition, patient_condition",
        [
            ("Severe renal impairment (eGFR < 30)", "On dialysis"),
            ("Severe asthma", "COPD"),
            ("Active bleeding", "Coagulation disorder"),
            ("Seizure disorder", "Epilepsy"),
            ("Severe liver disease", "Hepatic cirrhosis"),
        ],
    )
    def test_keyword_groups(self, rule_condition, patient_condition):
        patient = PatientInfo(medical_conditions=[patient_condition])
        assert is_condition_present(rule_condition, patient)

    def test_keyword_group_does_not_fall_through(self):
        # "renal" decides the outcome even though it is absent in the patient
        patient = PatientInfo(medical_conditions=["Hepatic failure"])
        assert not is_condition_present("Renal liver", patient)

    def test_word_overlap_is_permissive(self):
        patient = PatientInfo(medical_conditions=["Severe migraine"])
        assert is_condition_present("Severe asthma", patient)

    def test_absent(self):
        patient = PatientInfo(medical_conditions=["Hypertension"])
        assert not is_condition_present("Tendon disorders", patient)


class TestQueries:
    def test_for_medication(self):
        ids = [c.id for c in get_contraindications_for_medication("Metformin")]
        assert ids == ["metformin-renal-severe", "metformin-heart-failure"]

    def test_for_medication_exact(self):
        assert get_contraindications_for_medication("metformin") == []

    def test_all_returns_copy(self):
        everything = get_all_contraindications()
        assert len(everything) == 15
        everything.clear()
        assert len(get_all_contraindications()) == 15

    def test_by_severity(self, make_medication):
        patient = PatientInfo(
            medical_conditions=["Chronic kidney disease", "Congestive heart failure"]
        )
        meds = [make_medication("Metformin")]
        relative = get_contraindications_by_severity(
            meds, patient, ContraindicationSeverity.RELATIVE
        )
        assert [c.id for c in relative] == ["metformin-heart-failure"]

    def test_pregnancy_subset(self, make_medication):
        patient = PatientInfo(pregnancy_status="pregnant")
        meds = [make_medication("Lisinopril"), make_medication("Warfarin")]
        result = check_pregnancy_contraindications(meds, patient)
        assert [c.id for c in result] == ["lisinopril-pregnancy"]

    def test_pregnancy_subset_empty_when_not_pregnant(self, make_medication):
        meds = [make_medication("Lisinopril")]
        assert check_pregnancy_contraindications(meds, PatientInfo()) == []

    def test_monitoring_deduplicated_in_order(self):
        found = _by_id("warfarin-bleeding", "warfarin-liver-severe")
        assert get_monitoring_recommendations(found) == [
            "INR",
            "Hemoglobin",
            "Signs of bleeding",
            "Liver function tests",
            "Bleeding signs",
        ]

    def test_alternatives(self):
        found = _by_id("bupropion-seizure", "omeprazole-magnesium")
        assert get_alternative_medications(found) == [
            "Use alternative antidepressants",
            "Correct magnesium levels first, consider H2 blockers",
        ]


class TestRisk:
    def test_two_absolute_one_relative(self):
        found = _by_id("warfarin-bleeding", "aspirin-ulcer", "ciprofloxacin-tendon")
        assert calculate_risk_score(found) == 25

    def test_empty_is_zero(self):
        assert calculate_risk_score([]) == 0

    def test_capped_at_100(self):
        absolute = [
            c for c in get_all_contraindications()
            if c.severity == ContraindicationSeverity.ABSOLUTE
        ]
        assert calculate_risk_score(absolute) == 100  # 12 absolute rules
        assert calculate_risk_score(absolute * 3) == 100

    @pytest.mark.parametrize(
        "score, level",
        [
            (100, "Very High Risk"),
            (80, "Very High Risk"),
            (79, "High Risk"),
            (60, "High Risk"),
            (45, "Moderate Risk"),
            (40, "Moderate Risk"),
            (20, "Low Risk"),
            (19, "Minimal Risk"),
            (0, "Minimal Risk"),
        ],
    )
    def test_risk_level(self, score, level):
        assert get_risk_level(score) == level
