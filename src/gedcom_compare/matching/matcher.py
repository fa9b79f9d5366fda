"""
Correspondence building between two record sets.

All functions are pure: they take a sequence of correspondences and return a
new tuple, never mutating their input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from gedcom_compare.logging import get_logger
from gedcom_compare.matching.similarity import likely_same_person
from gedcom_compare.records.models import IndividualRecord, RecordSet

log = get_logger("matcher")

MISSING_PLACEHOLDER = "N/A"

# Compared in this order; differences are reported in this order too.
DIFF_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Birth Date", "birth_date"),
    ("Birth Place", "birth_place"),
    ("Death Date", "death_date"),
    ("Death Place", "death_place"),
    ("Sex", "sex"),
)


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Correspondence:
    """A claimed link between one left-side and one right-side individual."""
    left_id: str
    right_id: str
    manual: bool = False
    differences: Tuple[str, ...] = ()

    def id_for(self, side: Side) -> str:
        return self.left_id if side == Side.LEFT else self.right_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "leftId": self.left_id,
            "rightId": self.right_id,
            "manual": self.manual,
            "differences": list(self.differences),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Correspondence":
        return cls(
            left_id=str(data["leftId"]),
            right_id=str(data["rightId"]),
            manual=bool(data.get("manual", False)),
            differences=tuple(str(d) for d in data.get("differences") or ()),
        )


# ---------------------------------------------------------------------------
# Differences
# ---------------------------------------------------------------------------

def compute_differences(left: IndividualRecord, right: IndividualRecord) -> Tuple[str, ...]:
    """
    Describe every compared field whose values differ, e.g.

        'Sex: "M" vs "N/A"'
    """
    differences: List[str] = []
    for label, attr in DIFF_FIELDS:
        lval = getattr(left, attr)
        rval = getattr(right, attr)
        if lval != rval:
            differences.append(
                f'{label}: "{lval or MISSING_PLACEHOLDER}" vs "{rval or MISSING_PLACEHOLDER}"'
            )
    return tuple(differences)


# ---------------------------------------------------------------------------
# Automatic matching
# ---------------------------------------------------------------------------

def auto_match(left: RecordSet, right: RecordSet) -> Tuple[Correspondence, ...]:
    """
    Greedy first-fit matching.

    Each left record, in order, takes the first right record (in order) that
    is not yet matched and passes ``likely_same_person``. There is no
    backtracking, so the result depends on input order.
    """
    matches: List[Correspondence] = []
    consumed: Set[str] = set()

    for lrec in left.records:
        for rrec in right.records:
            if rrec.id in consumed:
                continue
            if likely_same_person(lrec, rrec):
                matches.append(
                    Correspondence(
                        left_id=lrec.id,
                        right_id=rrec.id,
                        manual=False,
                        differences=compute_differences(lrec, rrec),
                    )
                )
                consumed.add(rrec.id)
                break

    log.info(
        "Auto-matched %d pair(s) between %s (%d) and %s (%d)",
        len(matches),
        left.source_label,
        len(left),
        right.source_label,
        len(right),
    )
    return tuple(matches)


# ---------------------------------------------------------------------------
# Manual edits
# ---------------------------------------------------------------------------

def add_manual_match(
    matches: Iterable[Correspondence],
    left: RecordSet,
    right: RecordSet,
    left_id: str,
    right_id: str,
) -> Tuple[Correspondence, ...]:
    """
    Link ``left_id`` to ``right_id``, replacing any match either side had.

    If either id does not resolve, the existing matches of both ids are still
    dropped but no new correspondence is added.
    """
    filtered = [m for m in matches if m.left_id != left_id and m.right_id != right_id]

    lrec = left.get(left_id)
    rrec = right.get(right_id)
    if lrec is None or rrec is None:
        log.warning("Manual match %s <-> %s: unknown id; nothing added", left_id, right_id)
        return tuple(filtered)

    filtered.append(
        Correspondence(
            left_id=left_id,
            right_id=right_id,
            manual=True,
            differences=compute_differences(lrec, rrec),
        )
    )
    return tuple(filtered)


def remove_match(
    matches: Iterable[Correspondence],
    left_id: str,
    right_id: str,
) -> Tuple[Correspondence, ...]:
    """Drop the correspondence linking exactly ``left_id`` and ``right_id``."""
    return tuple(m for m in matches if not (m.left_id == left_id and m.right_id == right_id))


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def unmatched_of(
    side: Side,
    records: Iterable[IndividualRecord],
    matches: Iterable[Correspondence],
) -> List[IndividualRecord]:
    matched = {m.id_for(side) for m in matches}
    return [r for r in records if r.id not in matched]


def match_for_person(
    matches: Sequence[Correspondence],
    person_id: str,
    side: Side,
) -> Optional[Correspondence]:
    for m in matches:
        if m.id_for(side) == person_id:
            return m
    return None
