"""
Name similarity and the "likely the same person" rule.

Similarity is the normalized Levenshtein score of the two full display names:

    similarity(a, b) = 1 - edit_distance(a, b) / max(len(a), len(b))

Two individuals are only ever considered the same person when both carry the
same, non-empty birth date. Names alone never qualify.
"""

from __future__ import annotations

import Levenshtein

from gedcom_compare.records.models import IndividualRecord

NAME_SIMILARITY_THRESHOLD = 0.8


def edit_distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance, case-sensitive."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Return a score in [0, 1]; two empty strings are identical (1.0)."""
    longest = max(len(a), len(b))
    if not longest:
        return 1.0
    return (longest - edit_distance(a, b)) / longest


def likely_same_person(left: IndividualRecord, right: IndividualRecord) -> bool:
    """
    True when both birth dates are present and equal AND the full names are
    identical or more than 80% similar.
    """
    if not left.birth_date or left.birth_date != right.birth_date:
        return False

    if left.full_name == right.full_name:
        return True

    return similarity(left.full_name, right.full_name) > NAME_SIMILARITY_THRESHOLD
