"""
Exporter package.

Re-exports the JSON report entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .json_exporter import build_report, build_summary, export_report_json, serialize_report

__all__ = ["build_report", "build_summary", "export_report_json", "serialize_report"]
