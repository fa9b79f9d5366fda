# src/gedcom_compare/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gedcom_compare.logging import get_logger

log = get_logger("tokenizer")


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "NAME", "BIRT", "DATE".
        value: Remaining tokens joined by single spaces (may be empty).
        raw: The trimmed line content.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def _is_pointer(text: str) -> bool:
    return len(text) > 1 and text.startswith("@") and text.endswith("@")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    The line is trimmed and split on runs of whitespace:
        <level> [<pointer>] <tag> [<value>...]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 12 JAN 1900"
    """
    raw = line.strip()

    # Handle optional UTF-8 BOM on the very first line.
    if lineno <= 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff").lstrip()

    if not raw:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    parts = raw.split()

    # --- 1. Level ---------------------------------------------------------
    level_str = parts[0]
    if not (level_str.isascii() and level_str.isdigit()):
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )
    level = int(level_str)
    rest = parts[1:]

    # --- 2. Optional pointer ---------------------------------------------
    pointer: Optional[str] = None
    if rest and _is_pointer(rest[0]) and len(rest) > 1:
        pointer, rest = rest[0], rest[1:]

    # --- 3. Tag and value -------------------------------------------------
    if not rest:
        raise GedcomSyntaxError(f"Line {lineno}: missing tag after level -> {raw!r}")

    tag, value = rest[0], " ".join(rest[1:])

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag,
        value=value,
        raw=raw,
    )


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """
    Yield Token objects for every non-empty line.

    Malformed lines are logged and skipped; they never abort the scan.
    """
    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            skipped += 1
            log.debug("Skipping malformed line: %s", exc)

    if skipped:
        log.info("Skipped %d malformed line(s)", skipped)


def tokenize_text(text: str) -> Iterator[Token]:
    """Tokenize a whole GEDCOM document held in memory."""
    return tokenize_lines(text.splitlines())
