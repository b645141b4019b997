"""FastAPI application."""

from fastapi import FastAPI
from pydantic import Field

from meps import __version__
from meps.models.base import CamelModel
from meps.models.findings import (
    AllergyAlert,
    Contraindication,
    DosageCalculation,
    DrugInteraction,
)
from meps.models.medication import Medication, MedicationOption
from meps.models.patient import PatientInfo
from meps.models.report import SafetyReport
from meps.services.allergy_checker import check_allergies
from meps.services.contraindication_checker import check_contraindications
from meps.services.dosage_calculator import calculate_dosage
from meps.services.interaction_checker import check_interactions
from meps.services.medication_search import search_medications
from meps.services.safety_check import run_safety_check

app = FastAPI(
    title="MEPS API",
    description="Rule-based medication safety checks (supplementary aid only)",
    version=__version__,
)


class CheckRequest(CamelModel):
    """Medication list and patient submitted for checking."""

    patient: PatientInfo = Field(default_factory=PatientInfo)
    medications: list[Medication] = []


class DosageRequest(CamelModel):
    medication: Medication
    patient: PatientInfo = Field(default_factory=PatientInfo)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/check", response_model=SafetyReport)
def check(request: CheckRequest) -> SafetyReport:
    return run_safety_check(request.medications, request.patient)


@app.post("/interactions", response_model=list[DrugInteraction])
def interactions(request: CheckRequest) -> list[DrugInteraction]:
    return check_interactions(request.medications)


@app.post("/allergies", response_model=list[AllergyAlert])
def allergies(request: CheckRequest) -> list[AllergyAlert]:
    return check_allergies(request.medications, request.patient)


@app.post("/contraindications", response_model=list[Contraindication])
def contraindications(request: CheckRequest) -> list[Contraindication]:
    return check_contraindications(request.medications, request.patient)


@app.post("/dosage", response_model=DosageCalculation)
def dosage(request: DosageRequest) -> DosageCalculation:
    return calculate_dosage(request.medication, request.patient)


@app.get("/medications/search", response_model=list[MedicationOption])
def medication_search(q: str) -> list[MedicationOption]:
    return search_medications(q)
