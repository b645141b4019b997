"""Medication catalog search."""

from meps.constants import SEARCH_MAX_RESULTS, SEARCH_MIN_QUERY_LENGTH
from meps.data.catalog import MEDICATION_CATALOG
from meps.models.medication import MedicationOption


def search_medications(query: str) -> list[MedicationOption]:
    """Catalog entries whose name, generic name or category contains the query.

    Queries shorter than two characters return nothing. At most ten results,
    in catalog order.
    """
    if not query or len(query) < SEARCH_MIN_QUERY_LENGTH:
        return []

    term = query.lower()
    results = [
        med
        for med in MEDICATION_CATALOG
        if term in med.name.lower()
        or term in med.generic_name.lower()
        or term in med.category.lower()
    ]
    return results[:SEARCH_MAX_RESULTS]


def get_medication_by_name(name: str) -> MedicationOption | None:
    """Exact (case-insensitive) lookup by brand or generic name."""
    name = name.lower()
    return next(
        (
            med
            for med in MEDICATION_CATALOG
            if med.name.lower() == name or med.generic_name.lower() == name
        ),
        None,
    )


def get_medications_by_category(category: str) -> list[MedicationOption]:
    category = category.lower()
    return [med for med in MEDICATION_CATALOG if category in med.category.lower()]


def get_all_categories() -> list[str]:
    return sorted({med.category for med in MEDICATION_CATALOG})
