"""Drug-drug interaction rules, in match order."""

from meps.models.rules import EvidenceTier, InteractionRule, InteractionSeverity

INTERACTION_RULES: tuple[InteractionRule, ...] = (
    # -- Bupropion (Wellbutrin) ---------------------------------------------
    InteractionRule(
        medications=("wellbutrin", "strattera"),
        severity=InteractionSeverity.MAJOR,
        description="Wellbutrin (Bupropion) and Strattera (Atomoxetine)",
        clinical_effect="Increased risk of seizures, hypertension, and cardiovascular events",
        management="Monitor blood pressure and heart rate closely. Consider alternative treatments or lower doses.",
        evidence=EvidenceTier.EXCELLENT,
        references=("FDA Drug Interaction Database", "Clinical Pharmacology 2024"),
    ),
    InteractionRule(
        medications=("wellbutrin", "prozac"),
        severity=InteractionSeverity.MODERATE,
        description="Wellbutrin (Bupropion) and Prozac (Fluoxetine)",
        clinical_effect="Increased risk of seizures and serotonin syndrome",
        management="Monitor for seizure activity and serotonin syndrome symptoms. Consider dose reduction.",
        evidence=EvidenceTier.GOOD,
        references=("Drug Interaction Database 2024",),
    ),
    InteractionRule(
        medications=("wellbutrin", "alcohol"),
        severity=InteractionSeverity.MAJOR,
        description="Wellbutrin (Bupropion) and Alcohol",
        clinical_effect="Increased risk of seizures and central nervous system depression",
        management="Avoid alcohol consumption. If unavoidable, monitor closely for seizure activity.",
        evidence=EvidenceTier.EXCELLENT,
        references=("FDA Labeling", "Clinical Guidelines"),
    ),
    # -- Warfarin -----------------------------------------------------------
    InteractionRule(
        medications=("warfarin", "aspirin"),
        severity=InteractionSeverity.MODERATE,
        description="Warfarin and Aspirin",
        clinical_effect="Increased bleeding risk due to additive anticoagulant effects",
        management="Monitor INR closely, consider lower aspirin dose or alternative pain management",
        evidence=EvidenceTier.EXCELLENT,
        references=("Anticoagulation Guidelines 2024",),
    ),
    InteractionRule(
        medications=("warfarin", "ibuprofen"),
        severity=InteractionSeverity.MODERATE,
        description="Warfarin and Ibuprofen",
        clinical_effect="Increased bleeding risk and potential for gastrointestinal bleeding",
        management="Monitor INR and watch for signs of bleeding. Consider acetaminophen instead.",
        evidence=EvidenceTier.GOOD,
        references=("Drug Interaction Database 2024",),
    ),
    InteractionRule(
        medications=("warfarin", "vitamin-k"),
        severity=InteractionSeverity.MODERATE,
        description="Warfarin and Vitamin K",
        clinical_effect="Decreased anticoagulant effect of warfarin",
        management="Maintain consistent vitamin K intake. Monitor INR more frequently if diet changes.",
        evidence=EvidenceTier.EXCELLENT,
        references=("Anticoagulation Guidelines 2024",),
    ),
    # -- SSRIs --------------------------------------------------------------
    InteractionRule(
        medications=("prozac", "zoloft"),
        severity=InteractionSeverity.MODERATE,
        description="Prozac (Fluoxetine) and Zoloft (Sertraline)",
        clinical_effect="Increased risk of serotonin syndrome",
        management="Monitor for serotonin syndrome symptoms. Consider alternative treatment.",
        evidence=EvidenceTier.GOOD,
        references=("SSRI Interaction Guidelines",),
    ),
    InteractionRule(
        medications=("prozac", "maoi"),
        severity=InteractionSeverity.CONTRAINDICATED,
        description="Prozac (Fluoxetine) and MAOIs",
        clinical_effect="Life-threatening serotonin syndrome",
        management="CONTRAINDICATED - Do not use together. Wait 14 days between treatments.",
        evidence=EvidenceTier.EXCELLENT,
        references=("FDA Black Box Warning",),
    ),
    # -- Blood pressure / metabolic -----------------------------------------
    InteractionRule(
        medications=("lisinopril", "potassium"),
        severity=InteractionSeverity.MODERATE,
        description="Lisinopril and Potassium Supplements",
        clinical_effect="Risk of hyperkalemia (high potassium levels)",
        management="Monitor potassium levels regularly. Avoid high-potassium foods.",
        evidence=EvidenceTier.GOOD,
        references=("Hypertension Guidelines 2024",),
    ),
    InteractionRule(
        medications=("metformin", "contrast"),
        severity=InteractionSeverity.MODERATE,
        description="Metformin and Contrast Dye",
        clinical_effect="Risk of lactic acidosis with contrast imaging",
        management="Hold metformin 48 hours before and after contrast procedures.",
        evidence=EvidenceTier.EXCELLENT,
        references=("Radiology Safety Guidelines",),
    ),
    # -- Pain ---------------------------------------------------------------
    InteractionRule(
        medications=("morphine", "alcohol"),
        severity=InteractionSeverity.MAJOR,
        description="Morphine and Alcohol",
        clinical_effect="Severe respiratory depression and central nervous system depression",
        management="CONTRAINDICATED - Do not use together. Monitor respiratory status closely.",
        evidence=EvidenceTier.EXCELLENT,
        references=("FDA Black Box Warning",),
    ),
    InteractionRule(
        medications=("acetaminophen", "alcohol"),
        severity=InteractionSeverity.MODERATE,
        description="Acetaminophen and Alcohol",
        clinical_effect="Increased risk of liver damage",
        management="Limit alcohol consumption. Monitor liver function tests.",
        evidence=EvidenceTier.GOOD,
        references=("Hepatology Guidelines",),
    ),
)
