# src/gedcom_compare/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_compare.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        tokenize_lines,
        tokenize_text,
        load_file,
    )
"""

from __future__ import annotations

from .file_loader import load_file
from .tokenizer import Token, GedcomSyntaxError, tokenize_line, tokenize_lines, tokenize_text

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_text",
    "load_file",
]
