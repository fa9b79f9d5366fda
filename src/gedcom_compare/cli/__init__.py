
"""
CLI package for gedcom_compare.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_compare.cli.app import app, main

__all__ = [
    "app",
    "main",
]
