# src/gedcom_compare/utils/__init__.py

from .pathing import (
    project_root,
    resolve_project_path,
    mock_file_path,
)

__all__ = [
    "project_root",
    "resolve_project_path",
    "mock_file_path",
]
