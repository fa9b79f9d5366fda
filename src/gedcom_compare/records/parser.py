"""
Record parser: GEDCOM text -> RecordSet of IndividualRecord.

Only ``INDI`` records are extracted. The scan is tolerant: malformed lines
are skipped by the tokenizer, lines outside an individual are ignored, and an
individual with an empty identifier is dropped together with its lines.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from gedcom_compare.loader.tokenizer import Token, tokenize_text
from gedcom_compare.logging import get_logger
from gedcom_compare.records.models import FieldValue, IndividualRecord, RecordSet
from gedcom_compare.records.names import full_name, split_name

log = get_logger("record_parser")

INDIVIDUAL_TAG = "INDI"
NOTE_SEPARATOR = "; "


def strip_pointer(value: Optional[str]) -> str:
    """'@I1@' -> 'I1'"""
    return (value or "").replace("@", "").strip()


class _RecordBuilder:
    """Collects the level-1 fields (and their level-2 subfields) of one INDI."""

    def __init__(self, record_id: str, lineno: int):
        self.record_id = record_id
        self.lineno = lineno
        self.fields: Dict[str, List[FieldValue]] = {}
        self._last: Optional[Tuple[str, int]] = None

    def add_field(self, tag: str, value: str) -> None:
        values = self.fields.setdefault(tag, [])
        values.append(FieldValue(value=value))
        self._last = (tag, len(values) - 1)

    def add_subfield(self, tag: str, value: str) -> bool:
        # Attaches to the level-1 value appended last, whatever its tag.
        if self._last is None:
            return False
        parent_tag, index = self._last
        values = self.fields[parent_tag]
        values[index] = values[index].with_subfield(tag, value)
        return True

    def first(self, tag: str) -> Optional[FieldValue]:
        values = self.fields.get(tag)
        return values[0] if values else None

    def build(self) -> IndividualRecord:
        name = self.first("NAME")
        given, surname = split_name(name.value if name else "")

        birth = self.first("BIRT") or FieldValue()
        death = self.first("DEAT") or FieldValue()
        sex = self.first("SEX")

        notes = [text for text in (fv.text() for fv in self.fields.get("NOTE", [])) if text]

        return IndividualRecord(
            id=self.record_id,
            full_name=full_name(given, surname),
            given_names=given,
            surname=surname,
            birth_date=birth.sub("DATE"),
            birth_place=birth.sub("PLAC"),
            death_date=death.sub("DATE"),
            death_place=death.sub("PLAC"),
            sex=(sex.value or None) if sex else None,
            spouse_family_refs=tuple(strip_pointer(fv.value) for fv in self.fields.get("FAMS", [])),
            child_family_refs=tuple(strip_pointer(fv.value) for fv in self.fields.get("FAMC", [])),
            notes=NOTE_SEPARATOR.join(notes) if notes else None,
            raw_fields={tag: tuple(values) for tag, values in self.fields.items()},
        )


def build_records(tokens: Iterable[Token]) -> List[IndividualRecord]:
    """
    Build IndividualRecords from a token stream.

    Rules:
        - ``0 @I1@ INDI`` (or ``0 INDI @I1@``) opens a new record; the open
          one is finalized first.
        - Any other level-0 line closes the open record.
        - Level-1 lines add a field value to the open record.
        - Level-2 lines become subfields of the last level-1 value.
        - Deeper levels are ignored.
    """
    records: List[IndividualRecord] = []
    seen: Dict[str, int] = {}
    current: Optional[_RecordBuilder] = None

    def finalize(builder: Optional[_RecordBuilder]) -> None:
        if builder is None:
            return
        if builder.record_id in seen:
            log.warning(
                "Duplicate individual id %r at line %d (first seen at line %d); dropped",
                builder.record_id,
                builder.lineno,
                seen[builder.record_id],
            )
            return
        seen[builder.record_id] = builder.lineno
        records.append(builder.build())

    for tok in tokens:
        if tok.level == 0:
            finalize(current)
            current = None
            if tok.tag == INDIVIDUAL_TAG:
                record_id = strip_pointer(tok.pointer or tok.value)
                if record_id:
                    current = _RecordBuilder(record_id, tok.lineno)
                else:
                    log.debug("Line %d: individual without id ignored", tok.lineno)
            continue

        if current is None:
            continue

        if tok.level == 1:
            current.add_field(tok.tag, tok.value)
        elif tok.level == 2:
            if not current.add_subfield(tok.tag, tok.value):
                log.debug("Line %d: %s has no parent field; ignored", tok.lineno, tok.tag)

    finalize(current)
    return records


def parse_records(text: str, source_label: str) -> RecordSet:
    """
    Parse GEDCOM text into a RecordSet labelled with ``source_label``.

    Text without any individual yields an empty RecordSet; reporting that is
    left to the caller.
    """
    records = build_records(tokenize_text(text))
    log.info("Parsed %d individual(s) from %s", len(records), source_label)

    return RecordSet(
        source_label=source_label,
        records=tuple(records),
        parsed_at=datetime.now(timezone.utc).isoformat(),
    )
