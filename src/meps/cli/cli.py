"""Command-line interface for MEPS."""

import json
import logging
from pathlib import Path

import click
from pydantic import TypeAdapter

from meps.config import get_settings
from meps.models.medication import Medication
from meps.models.patient import PatientInfo
from meps.services.dosage_calculator import calculate_dosage
from meps.services.medication_search import search_medications
from meps.services.safety_check import run_safety_check
from meps.utils import storage


def _load_input(path: str) -> tuple[PatientInfo, list[Medication]]:
    """Read a {"patient": ..., "medications": [...]} document."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        patient = PatientInfo.model_validate(data.get("patient") or {})
        medications = TypeAdapter(list[Medication]).validate_python(
            data.get("medications") or []
        )
    except (OSError, ValueError, AttributeError) as e:
        raise click.BadParameter(f"cannot read {path}: {e}", param_hint="INPUT")
    return patient, medications


@click.group()
@click.version_option(package_name="meps")
def main():
    """MEPS: medication safety checks (a supplementary aid, not clinical advice)."""
    logging.basicConfig(
        level=get_settings().log_level, format="%(levelname)s %(name)s %(message)s"
    )


@main.command()
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(), help="Output file path (JSON)")
def check(input: str, output: str | None):
    """Run every safety check for the patient and medications in INPUT."""
    patient, medications = _load_input(input)
    report = run_safety_check(medications, patient)

    click.echo(f"Interactions ({len(report.interactions)}):")
    for i in report.interactions:
        click.echo(f"  [{i.severity.value}] {i.description}: {i.clinical_effect}")

    click.echo(f"Allergy alerts ({len(report.allergy_alerts)}):")
    for a in report.allergy_alerts:
        click.echo(f"  [{a.severity.value}] {a.medication} / {a.allergen}: {a.action}")

    click.echo(f"Contraindications ({len(report.contraindications)}):")
    for c in report.contraindications:
        click.echo(f"  [{c.severity.value}] {c.medication} - {c.condition}")

    click.echo("Dosage:")
    for d in report.dosage_calculations:
        click.echo(
            f"  {d.medication.name}: {d.calculated_dose:g} {d.unit} {d.frequency}".rstrip()
        )
        for w in d.warnings:
            click.echo(f"    - {w}")

    click.echo(f"Risk: {report.risk_score} ({report.risk_level})")

    if output:
        Path(output).write_text(
            report.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )
        click.echo(f"\nReport saved to: {output}")


@main.command()
@click.option("-m", "--medication", required=True, help="Medication name")
@click.option("--generic-name", default="", help="Generic name")
@click.option("--strength", type=float, default=None, help="Strength when no rule exists")
@click.option("--age", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--weight", type=float, default=0.0, show_default=True, help="kg")
@click.option(
    "--gender",
    type=click.Choice(["male", "female", "other"]),
    default="other",
    show_default=True,
)
def dose(
    medication: str,
    generic_name: str,
    strength: float | None,
    age: int,
    weight: float,
    gender: str,
):
    """Estimate an adjusted dose for one medication."""
    med = Medication(name=medication, generic_name=generic_name, strength=strength)
    patient = PatientInfo(age=age, weight=weight, gender=gender)
    result = calculate_dosage(med, patient)

    click.echo(f"{med.name}: {result.calculated_dose:g} {result.unit}")
    click.echo(f"Max daily dose: {result.max_daily_dose:g} {result.unit}")
    for a in result.adjustments:
        click.echo(f"  * {a}")
    for w in result.warnings:
        click.echo(f"  - {w}")


@main.command()
@click.argument("query")
def search(query: str):
    """Search the medication catalog."""
    results = search_medications(query)
    if not results:
        click.echo("No medications found.")
        return
    for i, med in enumerate(results, 1):
        click.echo(f"  {i}. {med.name} ({med.generic_name}) - {med.category}")


@main.command("export")
@click.option("-o", "--output", type=click.Path(), help="Output file path (JSON)")
def export_cmd(output: str | None):
    """Export the stored patient, medications and settings."""
    document = storage.export_data(get_settings().data_dir)
    if output:
        Path(output).write_text(document, encoding="utf-8")
        click.echo(f"Data exported to: {output}")
    else:
        click.echo(document)


@main.command("import")
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
def import_cmd(input: str):
    """Import a previously exported document into the store."""
    try:
        document = Path(input).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{input} is not a valid MEPS export: {e}")
    if not storage.import_data(document, get_settings().data_dir):
        raise click.ClickException(f"{input} is not a valid MEPS export")
    click.echo("Data imported.")


if __name__ == "__main__":
    main()
