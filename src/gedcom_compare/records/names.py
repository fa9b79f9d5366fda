"""
GEDCOM personal name splitting.

NAME values follow the "given names /Surname/" convention:

    "John /Smith/"          -> ("John", "Smith")
    "Mary Ann /Brown"       -> ("Mary Ann", "Brown")     closing slash optional
    "/Menzies/"             -> ("", "Menzies")
    "Cher"                  -> ("Cher", "")
"""

from __future__ import annotations

import re
from typing import Tuple

_NAME_RE = re.compile(r"^([^/]*)/([^/]*)/?")


def split_name(raw: str) -> Tuple[str, str]:
    """Return ``(given_names, surname)`` for a raw NAME value."""
    raw = raw or ""
    m = _NAME_RE.match(raw)
    if m:
        return m.group(1).strip(), m.group(2).strip()
    return raw.strip(), ""


def full_name(given: str, surname: str) -> str:
    return f"{given} {surname}".strip()
