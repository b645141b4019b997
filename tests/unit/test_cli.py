"""Unit tests for the click CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from meps.cli.cli import main
from meps.config import get_settings
from meps.models.patient import PatientInfo
from meps.utils.storage import load_patient_info, save_patient_info


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point the store at a temporary directory."""
    directory = tmp_path / "store"
    monkeypatch.setenv("MEPS_DATA_DIR", str(directory))
    get_settings.cache_clear()
    yield directory
    get_settings.cache_clear()


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.json"
    path.write_text(
        json.dumps(
            {
                "patient": {
                    "age": 50,
                    "weight": 80,
                    "gender": "male",
                    "medicalConditions": ["Active bleeding"],
                },
                "medications": [
                    {"name": "Warfarin", "genericName": "Warfarin"},
                    {"name": "Aspirin", "genericName": "Acetylsalicylic Acid"},
                ],
            }
        )
    )
    return path


def test_check_prints_findings(runner: CliRunner, input_file: Path) -> None:
    result = runner.invoke(main, ["check", str(input_file)])

    assert result.exit_code == 0, result.output
    assert "Warfarin and Aspirin" in result.output
    assert "Warfarin - Active bleeding" in result.output
    assert "Risk: 20 (Low Risk)" in result.output


def test_check_writes_report(runner: CliRunner, input_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "report.json"
    result = runner.invoke(main, ["check", str(input_file), "-o", str(output)])

    assert result.exit_code == 0, result.output
    report = json.loads(output.read_text())
    assert report["interactions"][0]["id"] == "interaction-warfarin-aspirin"
    assert report["riskScore"] == 20


def test_check_rejects_invalid_input(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{broken")
    result = runner.invoke(main, ["check", str(path)])
    assert result.exit_code == 2
    assert "cannot read" in result.output


def test_dose(runner: CliRunner) -> None:
    result = runner.invoke(
        main,
        ["dose", "-m", "Strattera", "--age", "40", "--weight", "70", "--gender", "male"],
    )
    assert result.exit_code == 0, result.output
    assert "Strattera: 40 mg" in result.output
    assert "Max daily dose: 100 mg" in result.output
    assert "Dose adjusted for patient weight" in result.output


def test_search(runner: CliRunner) -> None:
    result = runner.invoke(main, ["search", "warf"])
    assert result.exit_code == 0
    assert "1. Warfarin (Warfarin) - Anticoagulant" in result.output


def test_search_no_results(runner: CliRunner) -> None:
    result = runner.invoke(main, ["search", "zzz"])
    assert "No medications found." in result.output


def test_export_then_import(runner: CliRunner, data_dir: Path, tmp_path: Path) -> None:
    save_patient_info(PatientInfo(age=33, allergies=["Latex"]), data_dir)
    export_path = tmp_path / "export.json"

    result = runner.invoke(main, ["export", "-o", str(export_path)])
    assert result.exit_code == 0, result.output

    (data_dir / "patient_info.json").unlink()
    result = runner.invoke(main, ["import", str(export_path)])

    assert result.exit_code == 0, result.output
    assert load_patient_info(data_dir) == PatientInfo(age=33, allergies=["Latex"])


def test_import_rejects_bad_document(runner: CliRunner, data_dir: Path, tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("nope")
    result = runner.invoke(main, ["import", str(path)])
    assert result.exit_code == 1
    assert "not a valid MEPS export" in result.output


def test_import_rejects_non_utf8_file(runner: CliRunner, data_dir: Path, tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"patientInfo": {"allergies": ["P\xe9nicilline"]}}')
    result = runner.invoke(main, ["import", str(path)])
    assert result.exit_code == 1
    assert "not a valid MEPS export" in result.output
    assert load_patient_info(data_dir) is None


def test_export_writes_utf8(runner: CliRunner, data_dir: Path, tmp_path: Path) -> None:
    save_patient_info(PatientInfo(allergies=["Pénicilline"]), data_dir)
    export_path = tmp_path / "export.json"

    result = runner.invoke(main, ["export", "-o", str(export_path)])

    assert result.exit_code == 0, result.output
    document = json.loads(export_path.read_text(encoding="utf-8"))
    assert document["patientInfo"]["allergies"] == ["Pénicilline"]


def test_dose_rejects_negative_age(runner: CliRunner) -> None:
    result = runner.invoke(main, ["dose", "-m", "Strattera", "--age", "-5"])
    assert result.exit_code == 2
