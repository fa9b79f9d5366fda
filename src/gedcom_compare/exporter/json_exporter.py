"""
json_exporter.py
JSON comparison report for a ComparisonSession.

The report carries the full session snapshot (same shape as the session
store) plus a summary block with the counts a reviewer looks at first.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from gedcom_compare.logging import get_logger
from gedcom_compare.matching import Side
from gedcom_compare.session import ComparisonSession

log = get_logger("json_exporter")


def build_summary(session: ComparisonSession) -> Dict[str, int]:
    manual = sum(1 for m in session.matches if m.manual)
    return {
        "left_count": len(session.left),
        "right_count": len(session.right),
        "matched": len(session.matches),
        "manual": manual,
        "automatic": len(session.matches) - manual,
        "with_differences": sum(1 for m in session.matches if m.differences),
        "unmatched_left": len(session.unmatched(Side.LEFT)),
        "unmatched_right": len(session.unmatched(Side.RIGHT)),
    }


def build_report(session: ComparisonSession) -> Dict[str, Any]:
    return {
        "summary": build_summary(session),
        "session": session.to_dict(),
    }


def serialize_report(session: ComparisonSession, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(build_report(session), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(build_report(session), indent=indent, ensure_ascii=False)


def export_report_json(session: ComparisonSession, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting comparison report to: %s (LEFT=%d, RIGHT=%d, MATCHES=%d)",
        output_path,
        len(session.left),
        len(session.right),
        len(session.matches),
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_report(session, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
