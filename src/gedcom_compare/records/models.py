from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


# -----------------------------
# Field values (small atoms)
# -----------------------------

@dataclass(frozen=True, slots=True)
class FieldValue:
    """
    One level-1 field occurrence of an individual record.

    Level-2 lines that follow the field are kept as ordered ``(tag, value)``
    pairs instead of being folded into the value string:

        1 BIRT
        2 DATE 12 JAN 1900
        2 PLAC Boston

      -> FieldValue(value="", subfields=(("DATE", "12 JAN 1900"), ("PLAC", "Boston")))
    """
    value: str = ""
    subfields: Tuple[Tuple[str, str], ...] = ()

    def sub(self, tag: str) -> Optional[str]:
        """Return the first non-empty sub-value for ``tag``, or None."""
        for stag, svalue in self.subfields:
            if stag == tag and svalue:
                return svalue
        return None

    def text(self) -> str:
        """Return the value with CONC/CONT continuation lines applied."""
        out = self.value
        for stag, svalue in self.subfields:
            if stag == "CONC":
                out += svalue
            elif stag == "CONT":
                out += "\n" + svalue
        return out

    def with_subfield(self, tag: str, value: str) -> "FieldValue":
        return FieldValue(self.value, self.subfields + ((tag, value),))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "subfields": [[t, v] for t, v in self.subfields],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "FieldValue":
        # Plain strings come from legacy session files.
        if isinstance(data, str):
            return cls(value=data)
        return cls(
            value=str(data.get("value") or ""),
            subfields=tuple((str(t), str(v)) for t, v in data.get("subfields") or []),
        )


# -----------------------------
# Individuals
# -----------------------------

def _opt(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True, slots=True)
class IndividualRecord:
    """
    One parsed person (an ``INDI`` record).

    ``raw_fields`` holds every level-1 field of the record in order, including
    the ones that were extracted into the typed attributes.
    """
    id: str
    full_name: str = ""
    given_names: str = ""
    surname: str = ""

    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    death_date: Optional[str] = None
    death_place: Optional[str] = None
    sex: Optional[str] = None

    spouse_family_refs: Tuple[str, ...] = ()  # FAMS
    child_family_refs: Tuple[str, ...] = ()   # FAMC

    notes: Optional[str] = None
    raw_fields: Mapping[str, Tuple[FieldValue, ...]] = field(default_factory=dict)

    def display_name(self) -> str:
        if self.birth_date:
            return f"{self.full_name} (b. {self.birth_date})"
        return self.full_name

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "fullName": self.full_name,
            "givenNames": self.given_names,
            "surname": self.surname,
        }
        optional = {
            "birthDate": self.birth_date,
            "birthPlace": self.birth_place,
            "deathDate": self.death_date,
            "deathPlace": self.death_place,
            "sex": self.sex,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        data["spouseFamilyRefs"] = list(self.spouse_family_refs)
        data["childFamilyRefs"] = list(self.child_family_refs)
        if self.notes is not None:
            data["notes"] = self.notes
        data["rawFields"] = {
            tag: [fv.to_dict() for fv in values]
            for tag, values in self.raw_fields.items()
        }
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IndividualRecord":
        """
        Rebuild a record from its persisted form.

        Also accepts legacy session key names
        (``name``, ``familiesAsSpouse``, ``familiesAsChild``, ``rawData``).
        """
        raw = data.get("rawFields", data.get("rawData")) or {}
        return cls(
            id=str(data["id"]),
            full_name=str(data.get("fullName", data.get("name")) or ""),
            given_names=str(data.get("givenNames") or ""),
            surname=str(data.get("surname") or ""),
            birth_date=_opt(data.get("birthDate")),
            birth_place=_opt(data.get("birthPlace")),
            death_date=_opt(data.get("deathDate")),
            death_place=_opt(data.get("deathPlace")),
            sex=_opt(data.get("sex")),
            spouse_family_refs=tuple(data.get("spouseFamilyRefs", data.get("familiesAsSpouse")) or ()),
            child_family_refs=tuple(data.get("childFamilyRefs", data.get("familiesAsChild")) or ()),
            notes=_opt(data.get("notes")),
            raw_fields={
                str(tag): tuple(FieldValue.from_dict(v) for v in values)
                for tag, values in raw.items()
            },
        )


# -----------------------------
# Record sets
# -----------------------------

@dataclass(frozen=True, slots=True)
class RecordSet:
    """
    The individuals parsed from one source file, in file order.

    ``parsed_at`` is informational and does not take part in equality.
    """
    source_label: str
    records: Tuple[IndividualRecord, ...] = ()
    parsed_at: Optional[str] = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[IndividualRecord]:
        return iter(self.records)

    @property
    def record_count(self) -> int:
        return len(self.records)

    def ids(self) -> List[str]:
        return [r.id for r in self.records]

    def get(self, record_id: str) -> Optional[IndividualRecord]:
        for record in self.records:
            if record.id == record_id:
                return record
        return None
