import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_compare.records import IndividualRecord, RecordSet  # noqa: E402


def person(record_id, name="", birth=None, **kwargs):
    """Shorthand IndividualRecord factory used across the test modules."""
    return IndividualRecord(id=record_id, full_name=name, birth_date=birth, **kwargs)


@pytest.fixture
def make_person():
    return person


@pytest.fixture
def make_set():
    def _make(label, *records):
        return RecordSet(source_label=label, records=tuple(records))

    return _make
