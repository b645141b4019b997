"""Drug-condition contraindication rules.

``medication`` is compared by exact, case-sensitive equality with the
medication name; ``condition`` is matched loosely against the patient.
"""

from meps.models.findings import Contraindication
from meps.models.rules import ContraindicationSeverity

ABSOLUTE = ContraindicationSeverity.ABSOLUTE
RELATIVE = ContraindicationSeverity.RELATIVE

CONTRAINDICATIONS: tuple[Contraindication, ...] = (
    # -- Cardiovascular -----------------------------------------------------
    Contraindication(
        id="warfarin-bleeding",
        medication="Warfarin",
        condition="Active bleeding",
        severity=ABSOLUTE,
        description="Warfarin is absolutely contraindicated in patients with active bleeding",
        alternative="Consider alternative anticoagulation or delay therapy",
        monitoring=("INR", "Hemoglobin", "Signs of bleeding"),
    ),
    Contraindication(
        id="warfarin-liver-severe",
        medication="Warfarin",
        condition="Severe liver disease",
        severity=ABSOLUTE,
        description="Severe liver disease impairs warfarin metabolism and increases bleeding risk",
        alternative="Consider LMWH or alternative anticoagulation",
        monitoring=("Liver function tests", "INR", "Bleeding signs"),
    ),
    Contraindication(
        id="aspirin-ulcer",
        medication="Aspirin",
        condition="Active peptic ulcer disease",
        severity=ABSOLUTE,
        description="Aspirin increases risk of gastrointestinal bleeding in active ulcer disease",
        alternative="Use acetaminophen for pain/fever, consider PPI if aspirin needed",
        monitoring=("Hemoglobin", "Stool occult blood", "GI symptoms"),
    ),
    Contraindication(
        id="metoprolol-asthma",
        medication="Metoprolol",
        condition="Severe asthma",
        severity=ABSOLUTE,
        description="Beta-blockers can cause severe bronchospasm in asthma patients",
        alternative="Consider calcium channel blockers or ACE inhibitors",
        monitoring=("Pulmonary function tests", "Respiratory symptoms"),
    ),
    Contraindication(
        id="lisinopril-pregnancy",
        medication="Lisinopril",
        condition="Pregnancy (2nd and 3rd trimester)",
        severity=ABSOLUTE,
        description="ACE inhibitors cause fetal malformations and death in 2nd/3rd trimester",
        alternative="Use methyldopa, labetalol, or nifedipine",
        monitoring=("Fetal monitoring", "Blood pressure", "Renal function"),
    ),
    # -- Antibiotics --------------------------------------------------------
    Contraindication(
        id="amoxicillin-penicillin-allergy",
        medication="Amoxicillin",
        condition="Penicillin allergy",
        severity=ABSOLUTE,
        description="Cross-reactivity between penicillins and cephalosporins",
        alternative="Use macrolides, fluoroquinolones, or clindamycin",
        monitoring=("Allergic reaction signs", "Skin rash monitoring"),
    ),
    Contraindication(
        id="ciprofloxacin-tendon",
        medication="Ciprofloxacin",
        condition="Tendon disorders",
        severity=RELATIVE,
        description="Fluoroquinolones increase risk of tendon rupture",
        alternative="Consider alternative antibiotics",
        monitoring=("Tendon pain", "Joint swelling", "Mobility assessment"),
    ),
    # -- Pain management ----------------------------------------------------
    Contraindication(
        id="morphine-respiratory",
        medication="Morphine",
        condition="Respiratory depression",
        severity=ABSOLUTE,
        description="Morphine can cause severe respiratory depression",
        alternative="Use non-opioid analgesics or lower potency opioids",
        monitoring=("Respiratory rate", "Oxygen saturation", "Consciousness level"),
    ),
    Contraindication(
        id="ibuprofen-renal-severe",
        medication="Ibuprofen",
        condition="Severe renal impairment (eGFR < 30)",
        severity=ABSOLUTE,
        description="NSAIDs can cause acute kidney injury in severe renal impairment",
        alternative="Use acetaminophen or topical analgesics",
        monitoring=("Renal function", "Urine output", "Electrolytes"),
    ),
    # -- Mental health ------------------------------------------------------
    Contraindication(
        id="sertraline-maoi",
        medication="Sertraline",
        condition="MAO inhibitor use",
        severity=ABSOLUTE,
        description="Risk of serotonin syndrome with MAO inhibitors",
        alternative="Wait 14 days after MAOI discontinuation before starting",
        monitoring=("Serotonin syndrome signs", "Blood pressure", "Temperature"),
    ),
    Contraindication(
        id="bupropion-seizure",
        medication="Bupropion",
        condition="Seizure disorder",
        severity=ABSOLUTE,
        description="Bupropion lowers seizure threshold",
        alternative="Use alternative antidepressants",
        monitoring=("Seizure activity", "EEG if indicated"),
    ),
    # -- Diabetes -----------------------------------------------------------
    Contraindication(
        id="metformin-renal-severe",
        medication="Metformin",
        condition="Severe renal impairment (eGFR < 30)",
        severity=ABSOLUTE,
        description="Risk of lactic acidosis with severe renal impairment",
        alternative="Use alternative antidiabetic agents",
        monitoring=("Renal function", "Lactate levels", "Acid-base status"),
    ),
    Contraindication(
        id="metformin-heart-failure",
        medication="Metformin",
        condition="Heart failure requiring pharmacologic treatment",
        severity=RELATIVE,
        description="Increased risk of lactic acidosis in heart failure",
        alternative="Consider alternative antidiabetic agents",
        monitoring=("Lactate levels", "Heart failure symptoms", "Renal function"),
    ),
    # -- Gastrointestinal ---------------------------------------------------
    Contraindication(
        id="omeprazole-magnesium",
        medication="Omeprazole",
        condition="Severe hypomagnesemia",
        severity=RELATIVE,
        description="PPIs can worsen hypomagnesemia",
        alternative="Correct magnesium levels first, consider H2 blockers",
        monitoring=("Magnesium levels", "ECG changes", "Neuromuscular symptoms"),
    ),
    # -- Respiratory --------------------------------------------------------
    Contraindication(
        id="albuterol-hypersensitivity",
        medication="Albuterol",
        condition="Hypersensitivity to beta-agonists",
        severity=ABSOLUTE,
        description="Risk of severe allergic reaction",
        alternative="Use anticholinergics or corticosteroids",
        monitoring=("Allergic reaction signs", "Respiratory status"),
    ),
)
