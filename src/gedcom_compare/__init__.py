"""
gedcom_compare: match individuals across two GEDCOM files and report
field-level differences.
"""

from gedcom_compare.matching import (
    Correspondence,
    Side,
    add_manual_match,
    auto_match,
    compute_differences,
    likely_same_person,
    remove_match,
    similarity,
    unmatched_of,
)
from gedcom_compare.records import IndividualRecord, RecordSet, parse_records
from gedcom_compare.session import ComparisonSession, SessionStore, create_session

__all__ = [
    "ComparisonSession",
    "Correspondence",
    "IndividualRecord",
    "RecordSet",
    "SessionStore",
    "Side",
    "add_manual_match",
    "auto_match",
    "compute_differences",
    "create_session",
    "likely_same_person",
    "parse_records",
    "remove_match",
    "similarity",
    "unmatched_of",
]
