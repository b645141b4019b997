"""
On-disk store for the current session.

Holds the patient, the medication list and free-form settings as JSON files
under a data directory. Records are written with camelCase keys so exported
documents keep the familiar shape. Loads never raise: a missing or
unreadable file yields an empty value.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from meps.constants import (
    EXPORT_VERSION,
    MEDICATIONS_FILE,
    PATIENT_INFO_FILE,
    SETTINGS_FILE,
)
from meps.models.medication import Medication
from meps.models.patient import PatientInfo

logger = logging.getLogger(__name__)

_medication_list = TypeAdapter(list[Medication])


def _read_json(path: Path) -> Any | None:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to read %s: %s", path.name, e)
        return None


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# ------------------------------------------------------------------
# Patient
# ------------------------------------------------------------------


def save_patient_info(patient: PatientInfo, data_dir: Path) -> None:
    _write_json(
        data_dir / PATIENT_INFO_FILE, patient.model_dump(mode="json", by_alias=True)
    )


def load_patient_info(data_dir: Path) -> PatientInfo | None:
    data = _read_json(data_dir / PATIENT_INFO_FILE)
    if data is None:
        return None
    try:
        return PatientInfo.model_validate(data)
    except ValidationError as e:
        logger.warning("Stored patient info is invalid: %s", e)
        return None


# ------------------------------------------------------------------
# Medications
# ------------------------------------------------------------------


def save_medications(medications: list[Medication], data_dir: Path) -> None:
    _write_json(
        data_dir / MEDICATIONS_FILE,
        _medication_list.dump_python(medications, mode="json", by_alias=True),
    )


def load_medications(data_dir: Path) -> list[Medication]:
    data = _read_json(data_dir / MEDICATIONS_FILE)
    if data is None:
        return []
    try:
        return _medication_list.validate_python(data)
    except ValidationError as e:
        logger.warning("Stored medications are invalid: %s", e)
        return []


# ------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------


def save_settings(settings: dict[str, Any], data_dir: Path) -> None:
    _write_json(data_dir / SETTINGS_FILE, settings)


def load_settings(data_dir: Path) -> dict[str, Any]:
    data = _read_json(data_dir / SETTINGS_FILE)
    return data if isinstance(data, dict) else {}


# ------------------------------------------------------------------
# Whole-store operations
# ------------------------------------------------------------------


def clear_all_data(data_dir: Path) -> None:
    for name in (PATIENT_INFO_FILE, MEDICATIONS_FILE, SETTINGS_FILE):
        (data_dir / name).unlink(missing_ok=True)


def has_stored_data(data_dir: Path) -> bool:
    return (data_dir / PATIENT_INFO_FILE).exists() or (
        data_dir / MEDICATIONS_FILE
    ).exists()


def export_data(data_dir: Path) -> str:
    """Serialise the whole store as one JSON document."""
    patient = load_patient_info(data_dir)
    data = {
        "patientInfo": (
            patient.model_dump(mode="json", by_alias=True) if patient else None
        ),
        "medications": _medication_list.dump_python(
            load_medications(data_dir), mode="json", by_alias=True
        ),
        "settings": load_settings(data_dir),
        "exportDate": datetime.now().isoformat(),
        "version": EXPORT_VERSION,
    }
    return json.dumps(data, indent=2)


def import_data(json_data: str, data_dir: Path) -> bool:
    """Store the sections present in an exported document.

    Every section is validated before anything is written, so a rejected
    document leaves the store untouched. Returns False when rejected.
    """
    try:
        data = json.loads(json_data)
        if not isinstance(data, dict):
            raise ValueError("export document must be a JSON object")
        # Empty sections are still present and overwrite what is stored.
        patient = (
            PatientInfo.model_validate(data["patientInfo"])
            if data.get("patientInfo") is not None
            else None
        )
        medications = (
            _medication_list.validate_python(data["medications"])
            if data.get("medications") is not None
            else None
        )
        settings = data.get("settings")
        if settings is not None and not isinstance(settings, dict):
            raise ValueError("settings must be a JSON object")
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        logger.error("Failed to import data: %s", e)
        return False

    if patient is not None:
        save_patient_info(patient, data_dir)
    if medications is not None:
        save_medications(medications, data_dir)
    if settings is not None:
        save_settings(settings, data_dir)
    return True
