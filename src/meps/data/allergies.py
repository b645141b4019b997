"""Allergy cross-reactivity rules."""

from meps.models.rules import AllergyRule, AllergySeverity

ALLERGY_RULES: tuple[AllergyRule, ...] = (
    # -- Penicillins / cephalosporins ---------------------------------------
    AllergyRule(
        allergen="penicillin",
        cross_reactive=("amoxicillin", "ampicillin", "cephalexin", "cefazolin", "ceftriaxone"),
        severity=AllergySeverity.SEVERE,
        reaction="Rash, hives, difficulty breathing, anaphylaxis",
        alternatives=("azithromycin", "clindamycin", "doxycycline", "vancomycin"),
        action="CONTRAINDICATED - Use alternative antibiotic",
    ),
    AllergyRule(
        allergen="amoxicillin",
        cross_reactive=("penicillin", "ampicillin", "cephalexin"),
        severity=AllergySeverity.MODERATE,
        reaction="Rash, hives, gastrointestinal upset",
        alternatives=("azithromycin", "clindamycin", "doxycycline"),
        action="Avoid - Use alternative antibiotic",
    ),
    AllergyRule(
        allergen="cephalexin",
        cross_reactive=("penicillin", "amoxicillin", "cefazolin", "ceftriaxone"),
        severity=AllergySeverity.MODERATE,
        reaction="Rash, hives, gastrointestinal upset",
        alternatives=("azithromycin", "clindamycin", "doxycycline"),
        action="Use with caution - Monitor for reactions",
    ),
    # -- Sulfonamides -------------------------------------------------------
    AllergyRule(
        allergen="sulfa",
        cross_reactive=(
            "sulfamethoxazole",
            "trimethoprim-sulfa",
            "sulfasalazine",
            "furosemide",
            "hydrochlorothiazide",
        ),
        severity=AllergySeverity.SEVERE,
        reaction="Stevens-Johnson syndrome, toxic epidermal necrolysis, anaphylaxis",
        alternatives=("amoxicillin", "azithromycin", "doxycycline"),
        action="CONTRAINDICATED - Use alternative medication",
    ),
    AllergyRule(
        allergen="sulfamethoxazole",
        cross_reactive=("sulfa", "trimethoprim-sulfa", "sulfasalazine"),
        severity=AllergySeverity.SEVERE,
        reaction="Severe skin reactions, blood disorders",
        alternatives=("amoxicillin", "azithromycin", "doxycycline"),
        action="CONTRAINDICATED - Use alternative antibiotic",
    ),
    # -- NSAIDs -------------------------------------------------------------
    AllergyRule(
        allergen="aspirin",
        cross_reactive=("ibuprofen", "naproxen", "diclofenac", "celecoxib"),
        severity=AllergySeverity.MODERATE,
        reaction="Asthma exacerbation, nasal polyps, gastrointestinal bleeding",
        alternatives=("acetaminophen", "tramadol", "codeine"),
        action="Avoid NSAIDs - Use acetaminophen for pain",
    ),
    AllergyRule(
        allergen="ibuprofen",
        cross_reactive=("aspirin", "naproxen", "diclofenac", "celecoxib"),
        severity=AllergySeverity.MODERATE,
        reaction="Gastrointestinal irritation, asthma exacerbation",
        alternatives=("acetaminophen", "tramadol", "codeine"),
        action="Avoid NSAIDs - Use acetaminophen for pain",
    ),
    # -- Opioids ------------------------------------------------------------
    AllergyRule(
        allergen="morphine",
        cross_reactive=("codeine", "hydrocodone", "oxycodone", "fentanyl"),
        severity=AllergySeverity.SEVERE,
        reaction="Respiratory depression, severe itching, anaphylaxis",
        alternatives=("acetaminophen", "tramadol", "gabapentin"),
        action="CONTRAINDICATED - Use alternative pain management",
    ),
    AllergyRule(
        allergen="codeine",
        cross_reactive=("morphine", "hydrocodone", "oxycodone"),
        severity=AllergySeverity.MODERATE,
        reaction="Respiratory depression, severe itching",
        alternatives=("acetaminophen", "tramadol", "gabapentin"),
        action="Avoid opioids - Use alternative pain management",
    ),
    # -- Anticonvulsants ----------------------------------------------------
    AllergyRule(
        allergen="phenytoin",
        cross_reactive=("carbamazepine", "oxcarbazepine", "lamotrigine"),
        severity=AllergySeverity.SEVERE,
        reaction="Stevens-Johnson syndrome, toxic epidermal necrolysis",
        alternatives=("valproic acid", "levetiracetam", "gabapentin"),
        action="CONTRAINDICATED - Use alternative anticonvulsant",
    ),
    AllergyRule(
        allergen="carbamazepine",
        cross_reactive=("phenytoin", "oxcarbazepine", "lamotrigine"),
        severity=AllergySeverity.SEVERE,
        reaction="Severe skin reactions, blood disorders",
        alternatives=("valproic acid", "levetiracetam", "gabapentin"),
        action="CONTRAINDICATED - Use alternative anticonvulsant",
    ),
    # -- ACE inhibitors -----------------------------------------------------
    AllergyRule(
        allergen="lisinopril",
        cross_reactive=("enalapril", "ramipril", "captopril", "benazepril"),
        severity=AllergySeverity.MODERATE,
        reaction="Angioedema, persistent cough, hyperkalemia",
        alternatives=("amlodipine", "losartan", "metoprolol"),
        action="Avoid ACE inhibitors - Use ARB or calcium channel blocker",
    ),
    # -- Statins ------------------------------------------------------------
    AllergyRule(
        allergen="atorvastatin",
        cross_reactive=("simvastatin", "lovastatin", "pravastatin", "rosuvastatin"),
        severity=AllergySeverity.MODERATE,
        reaction="Muscle pain, liver enzyme elevation, rash",
        alternatives=("ezetimibe", "colesevelam", "niacin"),
        action="Avoid statins - Use alternative cholesterol medication",
    ),
)

COMMON_ALLERGIES: tuple[str, ...] = (
    "Penicillin",
    "Amoxicillin",
    "Sulfa",
    "Aspirin",
    "Ibuprofen",
    "Morphine",
    "Codeine",
    "Phenytoin",
    "Carbamazepine",
    "Lisinopril",
    "Atorvastatin",
    "Latex",
    "Shellfish",
    "Peanuts",
    "Eggs",
    "Dairy",
)
