"""Medication catalog used by search."""

from meps.models.medication import MedicationOption

MEDICATION_CATALOG: tuple[MedicationOption, ...] = (
    # -- Antidepressants ----------------------------------------------------
    MedicationOption(
        name="Wellbutrin",
        generic_name="Bupropion",
        common_dosages=("75mg", "100mg", "150mg", "300mg"),
        forms=("tablet", "extended-release tablet"),
        category="Antidepressant",
        description="Atypical antidepressant used for depression and smoking cessation",
    ),
    MedicationOption(
        name="Prozac",
        generic_name="Fluoxetine",
        common_dosages=("10mg", "20mg", "40mg"),
        forms=("tablet", "capsule", "liquid"),
        category="SSRI Antidepressant",
        description="Selective serotonin reuptake inhibitor for depression and anxiety",
    ),
    MedicationOption(
        name="Zoloft",
        generic_name="Sertraline",
        common_dosages=("25mg", "50mg", "100mg", "200mg"),
        forms=("tablet", "liquid"),
        category="SSRI Antidepressant",
        description="SSRI used for depression, anxiety, and panic disorders",
    ),
    MedicationOption(
        name="Lexapro",
        generic_name="Escitalopram",
        common_dosages=("5mg", "10mg", "20mg"),
        forms=("tablet", "liquid"),
        category="SSRI Antidepressant",
        description="SSRI for depression and generalized anxiety disorder",
    ),
    # -- ADHD ---------------------------------------------------------------
    MedicationOption(
        name="Strattera",
        generic_name="Atomoxetine",
        common_dosages=("10mg", "18mg", "25mg", "40mg", "60mg", "80mg", "100mg"),
        forms=("capsule",),
        category="ADHD Medication",
        description="Non-stimulant medication for attention deficit hyperactivity disorder",
    ),
    MedicationOption(
        name="Adderall",
        generic_name="Amphetamine/Dextroamphetamine",
        common_dosages=("5mg", "10mg", "15mg", "20mg", "30mg"),
        forms=("tablet", "extended-release capsule"),
        category="ADHD Medication",
        description="Stimulant medication for ADHD and narcolepsy",
    ),
    MedicationOption(
        name="Ritalin",
        generic_name="Methylphenidate",
        common_dosages=("5mg", "10mg", "15mg", "20mg"),
        forms=("tablet", "extended-release tablet"),
        category="ADHD Medication",
        description="Stimulant for ADHD and narcolepsy",
    ),
    # -- Anticoagulants -----------------------------------------------------
    MedicationOption(
        name="Warfarin",
        generic_name="Warfarin",
        common_dosages=("1mg", "2mg", "2.5mg", "3mg", "4mg", "5mg", "6mg", "7.5mg", "10mg"),
        forms=("tablet",),
        category="Anticoagulant",
        description="Blood thinner used to prevent blood clots",
    ),
    MedicationOption(
        name="Eliquis",
        generic_name="Apixaban",
        common_dosages=("2.5mg", "5mg"),
        forms=("tablet",),
        category="Anticoagulant",
        description="Direct oral anticoagulant for stroke prevention",
    ),
    MedicationOption(
        name="Xarelto",
        generic_name="Rivaroxaban",
        common_dosages=("10mg", "15mg", "20mg"),
        forms=("tablet",),
        category="Anticoagulant",
        description="Direct oral anticoagulant for blood clot prevention",
    ),
    # -- Pain ---------------------------------------------------------------
    MedicationOption(
        name="Aspirin",
        generic_name="Acetylsalicylic Acid",
        common_dosages=("81mg", "325mg", "500mg"),
        forms=("tablet", "chewable tablet"),
        category="NSAID/Antiplatelet",
        description="Pain reliever and blood thinner",
    ),
    MedicationOption(
        name="Ibuprofen",
        generic_name="Ibuprofen",
        common_dosages=("200mg", "400mg", "600mg", "800mg"),
        forms=("tablet", "liquid", "gel"),
        category="NSAID",
        description="Nonsteroidal anti-inflammatory drug for pain and inflammation",
    ),
    MedicationOption(
        name="Tylenol",
        generic_name="Acetaminophen",
        common_dosages=("325mg", "500mg", "650mg"),
        forms=("tablet", "liquid", "suppository"),
        category="Analgesic",
        description="Pain reliever and fever reducer",
    ),
    MedicationOption(
        name="Morphine",
        generic_name="Morphine",
        common_dosages=("5mg", "10mg", "15mg", "30mg"),
        forms=("tablet", "injection", "liquid"),
        category="Opioid Analgesic",
        description="Strong pain medication for severe pain",
    ),
    # -- Diabetes -----------------------------------------------------------
    MedicationOption(
        name="Metformin",
        generic_name="Metformin",
        common_dosages=("500mg", "850mg", "1000mg"),
        forms=("tablet", "extended-release tablet"),
        category="Antidiabetic",
        description="First-line medication for type 2 diabetes",
    ),
    MedicationOption(
        name="Insulin",
        generic_name="Insulin",
        common_dosages=("10 units", "20 units", "30 units"),
        forms=("injection", "pen"),
        category="Antidiabetic",
        description="Hormone for blood sugar control in diabetes",
    ),
    # -- Blood pressure -----------------------------------------------------
    MedicationOption(
        name="Lisinopril",
        generic_name="Lisinopril",
        common_dosages=("2.5mg", "5mg", "10mg", "20mg", "40mg"),
        forms=("tablet",),
        category="ACE Inhibitor",
        description="ACE inhibitor for high blood pressure and heart failure",
    ),
    MedicationOption(
        name="Amlodipine",
        generic_name="Amlodipine",
        common_dosages=("2.5mg", "5mg", "10mg"),
        forms=("tablet",),
        category="Calcium Channel Blocker",
        description="Calcium channel blocker for hypertension and chest pain",
    ),
    # -- Cholesterol --------------------------------------------------------
    MedicationOption(
        name="Lipitor",
        generic_name="Atorvastatin",
        common_dosages=("10mg", "20mg", "40mg", "80mg"),
        forms=("tablet",),
        category="Statin",
        description="Statin medication for high cholesterol",
    ),
    MedicationOption(
        name="Crestor",
        generic_name="Rosuvastatin",
        common_dosages=("5mg", "10mg", "20mg", "40mg"),
        forms=("tablet",),
        category="Statin",
        description="Statin for cholesterol management",
    ),
)
