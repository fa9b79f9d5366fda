from __future__ import annotations

from .models import FieldValue, IndividualRecord, RecordSet
from .names import full_name, split_name
from .parser import build_records, parse_records, strip_pointer

__all__ = [
    "FieldValue",
    "IndividualRecord",
    "RecordSet",
    "build_records",
    "full_name",
    "parse_records",
    "split_name",
    "strip_pointer",
]
