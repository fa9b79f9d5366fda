"""
Comparison session: two record set snapshots plus their correspondence set.

Sessions are immutable. Every edit returns a new ComparisonSession, so a
reader holding the old object never observes a half-applied change.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from gedcom_compare.identity import new_session_id
from gedcom_compare.logging import get_logger
from gedcom_compare.matching.matcher import (
    Correspondence,
    Side,
    add_manual_match,
    auto_match,
    match_for_person,
    remove_match,
    unmatched_of,
)
from gedcom_compare.records.models import IndividualRecord, RecordSet

log = get_logger("session")


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class ComparisonSession:
    id: str
    timestamp: int
    left: RecordSet
    right: RecordSet
    matches: Tuple[Correspondence, ...] = ()

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def records(self, side: Side) -> RecordSet:
        return self.left if side == Side.LEFT else self.right

    def person(self, person_id: str, side: Side) -> Optional[IndividualRecord]:
        return self.records(side).get(person_id)

    def match_for(self, person_id: str, side: Side) -> Optional[Correspondence]:
        return match_for_person(self.matches, person_id, side)

    def unmatched(self, side: Side) -> List[IndividualRecord]:
        return unmatched_of(side, self.records(side).records, self.matches)

    # ------------------------------------------------------------------ #
    # Edits (copy-on-write)
    # ------------------------------------------------------------------ #

    def with_manual_match(self, left_id: str, right_id: str) -> "ComparisonSession":
        matches = add_manual_match(self.matches, self.left, self.right, left_id, right_id)
        return replace(self, matches=matches)

    def without_match(self, left_id: str, right_id: str) -> "ComparisonSession":
        return replace(self, matches=remove_match(self.matches, left_id, right_id))

    def reset_to_automatic(self) -> "ComparisonSession":
        """Recompute all matches from the stored snapshots; manual matches are lost."""
        dropped = sum(1 for m in self.matches if m.manual)
        if dropped:
            log.info("Session %s: reset discards %d manual match(es)", self.id, dropped)
        return replace(self, matches=auto_match(self.left, self.right))

    # ------------------------------------------------------------------ #
    # Serialization
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "leftFilename": self.left.source_label,
            "rightFilename": self.right.source_label,
            "leftPeople": [p.to_dict() for p in self.left.records],
            "rightPeople": [p.to_dict() for p in self.right.records],
            "matches": [m.to_dict() for m in self.matches],
        }


def create_session(
    left: RecordSet,
    right: RecordSet,
    *,
    session_id: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> ComparisonSession:
    """Start a session over two record sets, seeded with automatic matches."""
    ts = now_ms() if timestamp is None else timestamp
    sid = session_id or new_session_id(left.source_label, right.source_label, ts)

    session = ComparisonSession(
        id=sid,
        timestamp=ts,
        left=left,
        right=right,
        matches=auto_match(left, right),
    )
    log.info("Created session %s (%s vs %s)", sid, left.source_label, right.source_label)
    return session


def session_from_dict(data: Mapping[str, Any]) -> ComparisonSession:
    """Rebuild a session from its persisted snapshot (no re-parsing)."""
    left = RecordSet(
        source_label=str(data["leftFilename"]),
        records=tuple(IndividualRecord.from_dict(p) for p in data.get("leftPeople") or ()),
    )
    right = RecordSet(
        source_label=str(data["rightFilename"]),
        records=tuple(IndividualRecord.from_dict(p) for p in data.get("rightPeople") or ()),
    )
    return ComparisonSession(
        id=str(data["id"]),
        timestamp=int(data["timestamp"]),
        left=left,
        right=right,
        matches=tuple(Correspondence.from_dict(m) for m in data.get("matches") or ()),
    )
