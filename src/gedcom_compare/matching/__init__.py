from __future__ import annotations

from .matcher import (
    Correspondence,
    Side,
    add_manual_match,
    auto_match,
    compute_differences,
    match_for_person,
    remove_match,
    unmatched_of,
)
from .similarity import edit_distance, likely_same_person, similarity

__all__ = [
    "Correspondence",
    "Side",
    "add_manual_match",
    "auto_match",
    "compute_differences",
    "edit_distance",
    "likely_same_person",
    "match_for_person",
    "remove_match",
    "similarity",
    "unmatched_of",
]
