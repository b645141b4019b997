"""Unit tests for helpers/matching."""

import pytest

from meps.helpers.matching import (
    contains_any,
    fuzzy_match,
    fuzzy_match_any,
    words_overlap,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("Penicillin", "penicillin", True),
        ("penicillin allergy", "Penicillin", True),
        ("amox", "Amoxicillin", True),
        ("aspirin", "ibuprofen", False),
        ("", "aspirin", False),
        ("aspirin", "", False),
    ],
)
def test_fuzzy_match(a, b, expected):
    assert fuzzy_match(a, b) is expected


def test_fuzzy_match_is_symmetric():
    assert fuzzy_match("sulfa", "Sulfamethoxazole") == fuzzy_match(
        "Sulfamethoxazole", "sulfa"
    )


def test_fuzzy_match_any():
    assert fuzzy_match_any("Codeine", ["morphine", "codeine"]) is True
    assert fuzzy_match_any("Codeine", []) is False


@pytest.mark.parametrize(
    "phrase_a, phrase_b, expected",
    [
        ("active bleeding", "Active Bleeding", True),
        ("severe asthma", "asthma", True),
        ("seizure disorder", "seizures", True),
        ("tendon disorders", "anxiety disorder", True),
        ("respiratory depression", "hypertension", False),
        ("active bleeding", "", False),
    ],
)
def test_words_overlap(phrase_a, phrase_b, expected):
    assert words_overlap(phrase_a, phrase_b) is expected


def test_words_overlap_ignores_extra_whitespace():
    # "a  b".split(" ") would yield an empty word matching everything
    assert words_overlap("heart  failure", "migraine") is False


def test_contains_any():
    assert contains_any(["Chronic Kidney Disease"], ("kidney", "renal")) is True
    assert contains_any(["Asthma"], ("kidney", "renal")) is False
    assert contains_any([], ("kidney",)) is False
