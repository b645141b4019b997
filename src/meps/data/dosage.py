"""Per-medication dosing rules."""

from meps.models.rules import DosageRule

DOSAGE_RULES: tuple[DosageRule, ...] = (
    DosageRule(
        medication="wellbutrin",
        base_dose=150,
        unit="mg",
        max_daily_dose=450,
        weight_based=False,
        age_adjustment=True,
        renal_adjustment=True,
        hepatic_adjustment=True,
        warnings=("Monitor for seizures", "Avoid in eating disorders", "May cause insomnia"),
        contraindications=("Seizure disorder", "Eating disorders", "MAOI use"),
    ),
    DosageRule(
        medication="strattera",
        base_dose=40,
        unit="mg",
        max_daily_dose=100,
        weight_based=True,
        age_adjustment=True,
        renal_adjustment=True,
        hepatic_adjustment=True,
        warnings=("Monitor blood pressure", "Monitor heart rate", "May cause liver problems"),
        contraindications=("Narrow-angle glaucoma", "MAOI use", "Severe hepatic impairment"),
    ),
    DosageRule(
        medication="warfarin",
        base_dose=5,
        unit="mg",
        max_daily_dose=20,
        weight_based=True,
        age_adjustment=True,
        renal_adjustment=False,
        hepatic_adjustment=True,
        warnings=("Monitor INR regularly", "Watch for bleeding signs", "Avoid vitamin K changes"),
        contraindications=("Active bleeding", "Severe liver disease", "Pregnancy"),
    ),
    DosageRule(
        medication="metformin",
        base_dose=500,
        unit="mg",
        max_daily_dose=2550,
        weight_based=False,
        age_adjustment=True,
        renal_adjustment=True,
        hepatic_adjustment=True,
        warnings=("Monitor kidney function", "Watch for lactic acidosis", "Hold before contrast"),
        contraindications=("Severe renal impairment", "Severe hepatic impairment", "Contrast procedures"),
    ),
    DosageRule(
        medication="lisinopril",
        base_dose=10,
        unit="mg",
        max_daily_dose=40,
        weight_based=False,
        age_adjustment=True,
        renal_adjustment=True,
        hepatic_adjustment=False,
        warnings=("Monitor blood pressure", "Watch for cough", "Monitor potassium levels"),
        contraindications=("Pregnancy", "Bilateral renal artery stenosis", "Angioedema history"),
    ),
)
