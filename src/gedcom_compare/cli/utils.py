
from __future__ import annotations

from pathlib import Path
from typing import Iterable, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_compare.config import get_config
from gedcom_compare.core.exceptions import SessionNotFoundError
from gedcom_compare.matching import Side
from gedcom_compare.records import IndividualRecord
from gedcom_compare.session import ComparisonSession, SessionStore

console = Console()
err_console = Console(stderr=True)


def open_store(store: Optional[Path]) -> SessionStore:
    """Session store at ``store`` or at the configured ``paths.sessions_file``."""
    return SessionStore(store or get_config().resolve_path("sessions_file"))


def require_session(store: SessionStore, session_id: str) -> ComparisonSession:
    session = store.load(session_id)
    if session is None:
        raise SessionNotFoundError(session_id)
    return session


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[red][ERROR][/red] {message}")
    raise typer.Exit(code=1)


def parse_side(value: str) -> Side:
    try:
        return Side(value.lower())
    except ValueError:
        raise typer.BadParameter("side must be 'left' or 'right'") from None


def summary_table(session: ComparisonSession) -> Table:
    table = Table(title=f"Session {session.id}")
    table.add_column("", style="bold")
    table.add_column(session.left.source_label)
    table.add_column(session.right.source_label)

    table.add_row("Individuals", str(len(session.left)), str(len(session.right)))
    table.add_row(
        "Unmatched",
        str(len(session.unmatched(Side.LEFT))),
        str(len(session.unmatched(Side.RIGHT))),
    )
    manual = sum(1 for m in session.matches if m.manual)
    table.add_row("Matches", str(len(session.matches)), str(len(session.matches)))
    table.add_row("Manual matches", str(manual), str(manual))
    return table


def matches_table(session: ComparisonSession) -> Table:
    table = Table(title="Matches")
    table.add_column("Left")
    table.add_column("Right")
    table.add_column("Kind")
    table.add_column("Differences")

    for m in session.matches:
        left = session.left.get(m.left_id)
        right = session.right.get(m.right_id)
        table.add_row(
            f"{m.left_id} {left.display_name() if left else '?'}",
            f"{m.right_id} {right.display_name() if right else '?'}",
            "manual" if m.manual else "auto",
            "\n".join(m.differences) or "-",
        )
    return table


def people_table(title: str, people: Iterable[IndividualRecord]) -> Table:
    table = Table(title=title)
    table.add_column("Id")
    table.add_column("Name")
    for person in people:
        table.add_row(person.id, person.display_name())
    return table


def person_table(person: IndividualRecord) -> Table:
    table = Table(title=f"{person.id} {person.full_name}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    rows = [
        ("Given names", person.given_names),
        ("Surname", person.surname),
        ("Sex", person.sex),
        ("Birth date", person.birth_date),
        ("Birth place", person.birth_place),
        ("Death date", person.death_date),
        ("Death place", person.death_place),
        ("Spouse in", ", ".join(person.spouse_family_refs)),
        ("Child in", ", ".join(person.child_family_refs)),
        ("Notes", person.notes),
    ]
    for label, value in rows:
        if value:
            table.add_row(label, value)
    return table
