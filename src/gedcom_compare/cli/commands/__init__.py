
"""
CLI command modules for gedcom_compare.

``compare`` and ``stats`` are single Typer-compatible command functions;
``sessions`` is a Typer sub-application.
"""

from gedcom_compare.cli.commands.compare import compare_command
from gedcom_compare.cli.commands.sessions import sessions_app
from gedcom_compare.cli.commands.stats import stats_command

__all__ = [
    "compare_command",
    "sessions_app",
    "stats_command",
]
