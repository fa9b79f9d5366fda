from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_compare.logging import get_logger

log = get_logger("file_loader")


def load_file(path: Union[str, Path]) -> str:
    """Read a GEDCOM file as text, replacing undecodable bytes."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        text = f.read()

    log.info("Loaded file: %s (%d chars)", file_path, len(text))
    return text
