"""Project-wide constants."""

# -- Dosage -----------------------------------------------------------------
REFERENCE_WEIGHT_KG: float = 70.0
DEFAULT_BASE_DOSE: float = 10.0
FALLBACK_MAX_DAILY_MULTIPLIER: int = 3

ELDERLY_AGE: int = 65
PEDIATRIC_AGE: int = 18
ELDERLY_FACTOR: float = 0.8
PEDIATRIC_FACTOR: float = 0.7

# Cockcroft-Gault, serum creatinine assumed normal (mg/dL)
ASSUMED_SERUM_CREATININE: float = 1.0
FEMALE_CRCL_FACTOR: float = 0.85
SEVERE_RENAL_CRCL: float = 30.0
MODERATE_RENAL_CRCL: float = 60.0
SEVERE_RENAL_FACTOR: float = 0.5
MODERATE_RENAL_FACTOR: float = 0.75

# -- Contraindication risk --------------------------------------------------
ABSOLUTE_RISK_POINTS: int = 10
RELATIVE_RISK_POINTS: int = 5
MAX_RISK_SCORE: int = 100
RISK_LEVELS: list[tuple[int, str]] = [
    (80, "Very High Risk"),
    (60, "High Risk"),
    (40, "Moderate Risk"),
    (20, "Low Risk"),
]
MINIMAL_RISK_LEVEL: str = "Minimal Risk"

# Keyword → patient-condition terms that imply it (checked in this order)
CONDITION_KEYWORDS: list[tuple[tuple[str, ...], tuple[str, ...]]] = [
    (("renal", "kidney"), ("kidney", "renal", "dialysis")),
    (("liver",), ("liver", "hepatic")),
    (("asthma",), ("asthma", "copd")),
    (("bleeding",), ("bleeding", "hemorrhage", "coagulation")),
    (("seizure",), ("seizure", "epilepsy")),
    (("heart failure",), ("heart failure", "congestive heart failure")),
]

# -- Catalog search ---------------------------------------------------------
SEARCH_MIN_QUERY_LENGTH: int = 2
SEARCH_MAX_RESULTS: int = 10

# -- Storage ----------------------------------------------------------------
PATIENT_INFO_FILE: str = "patient_info.json"
MEDICATIONS_FILE: str = "medications.json"
SETTINGS_FILE: str = "settings.json"
EXPORT_VERSION: str = "1.0.0"
