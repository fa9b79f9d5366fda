"""
Logging package for ``gedcom_compare``.

Use ``get_logger("<module>")`` in modules to inherit the shared handlers and
write to a module-specific log file.
"""

from .logger import get_logger, list_active_loggers

__all__ = [
    "get_logger",
    "list_active_loggers",
]
