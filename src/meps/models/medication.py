"""Medication data models."""

import re
from enum import Enum
from uuid import uuid4

from pydantic import Field

from meps.models.base import CamelModel, ReferenceModel


class MedicationUnit(str, Enum):
    MG = "mg"
    ML = "ml"
    MCG = "mcg"
    G = "g"
    UNITS = "units"
    TABLETS = "tablets"
    CAPSULES = "capsules"


class Route(str, Enum):
    ORAL = "oral"
    INJECTION = "injection"
    TOPICAL = "topical"
    INHALATION = "inhalation"
    RECTAL = "rectal"
    VAGINAL = "vaginal"


class DosageForm(str, Enum):
    TABLET = "tablet"
    CAPSULE = "capsule"
    LIQUID = "liquid"
    INJECTION = "injection"
    CREAM = "cream"
    PATCH = "patch"
    INHALER = "inhaler"


class Medication(CamelModel):
    """A medication entered for the current session.

    ``id`` identifies this entry in the list only; two entries for the same
    drug get different ids.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str  # brand name as entered
    generic_name: str = ""
    dosage: str = ""  # free text, e.g. "150"
    unit: MedicationUnit = MedicationUnit.MG
    frequency: str = ""  # e.g. "twice daily"
    route: Route = Route.ORAL
    form: DosageForm = DosageForm.TABLET
    strength: float | None = None


_DOSAGE_TEXT = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-z]*)", re.IGNORECASE)


class MedicationOption(ReferenceModel):
    """A medication catalog entry offered by search."""

    name: str
    generic_name: str
    common_dosages: tuple[str, ...]
    forms: tuple[str, ...]
    category: str
    description: str

    def to_medication(self) -> Medication:
        """Build a session Medication from this catalog entry.

        Uses the first listed dosage ("150mg", "10 units") for strength and
        unit, and the first listed form that is a known DosageForm.
        """
        dosage, strength, unit = "", None, MedicationUnit.MG
        match = _DOSAGE_TEXT.match(self.common_dosages[0]) if self.common_dosages else None
        if match:
            dosage = match.group(1)
            strength = float(dosage)
            if match.group(2).lower() in {u.value for u in MedicationUnit}:
                unit = MedicationUnit(match.group(2).lower())

        known_forms = {f.value for f in DosageForm}
        form = next(
            (DosageForm(f) for f in self.forms if f in known_forms), DosageForm.TABLET
        )
        route = Route.INJECTION if form == DosageForm.INJECTION else Route.ORAL

        return Medication(
            name=self.name,
            generic_name=self.generic_name,
            dosage=dosage,
            unit=unit,
            frequency="once daily",
            route=route,
            form=form,
            strength=strength,
        )
