"""String similarity for product names and brands."""

import re

from rapidfuzz import distance

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_string(value: str) -> str:
    """Normalize a string for comparison.

    Lower-cases, trims, strips punctuation and collapses whitespace.
    """
    value = value.lower().strip()
    value = _NON_WORD.sub("", value)
    return _WHITESPACE.sub(" ", value)


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost edit distance (insertion, deletion, substitution)."""
    return distance.Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """Calculate similarity between two strings using Levenshtein distance.

    Returns a value between 0 (completely different) and 1 (identical).
    Inputs are normalized first, so "ACME, Inc." and "acme inc" are identical.
    """
    a = normalize_string(a)
    b = normalize_string(b)

    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))
