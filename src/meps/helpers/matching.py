"""
Loose string matching used by the checkers.

All matching is plain substring containment on lowercased text. It stands in
for a real drug/condition ontology and will over-match ("severe migraine"
satisfies "severe asthma" through the shared word).
"""


def fuzzy_match(a: str, b: str) -> bool:
    """True if either string contains the other, ignoring case.

    Empty strings never match.
    """
    a, b = a.lower(), b.lower()
    if not a or not b:
        return False
    return a in b or b in a


def fuzzy_match_any(text: str, candidates) -> bool:
    return any(fuzzy_match(text, c) for c in candidates)


def words_overlap(phrase_a: str, phrase_b: str) -> bool:
    """True if any word of one phrase contains, or is contained in, any word of the other."""
    words_b = phrase_b.lower().split()
    return any(
        wa in wb or wb in wa for wa in phrase_a.lower().split() for wb in words_b
    )


def contains_any(texts: list[str], terms) -> bool:
    """True if any lowercased text contains any of the terms."""
    return any(term in text.lower() for text in texts for term in terms)
