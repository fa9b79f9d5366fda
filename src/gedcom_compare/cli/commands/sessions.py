
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from gedcom_compare.cli.utils import (
    console,
    fail,
    matches_table,
    open_store,
    parse_side,
    people_table,
    person_table,
    require_session,
    summary_table,
)
from gedcom_compare.core import SessionNotFoundError
from gedcom_compare.exporter import export_report_json, serialize_report
from gedcom_compare.matching import Side

sessions_app = typer.Typer(
    name="sessions",
    help="Review, edit and delete saved comparison sessions",
    no_args_is_help=True,
)

STORE_OPTION = typer.Option(
    None,
    "--store",
    help="Session store file (defaults to paths.sessions_file)",
)


def _load(store: Optional[Path], session_id: str):
    session_store = open_store(store)
    try:
        return session_store, require_session(session_store, session_id)
    except SessionNotFoundError as exc:
        fail(str(exc))


@sessions_app.command("list")
def list_command(store: Optional[Path] = STORE_OPTION):
    """
    List saved sessions, newest first.
    """
    sessions = open_store(store).list_sessions()
    if not sessions:
        console.print("No saved sessions.")
        return

    table = Table(title="Saved sessions")
    table.add_column("Id")
    table.add_column("Saved")
    table.add_column("Left")
    table.add_column("Right")
    table.add_column("Matches", justify="right")

    for s in sessions:
        table.add_row(
            s.id,
            datetime.fromtimestamp(s.timestamp / 1000).strftime("%Y-%m-%d %H:%M:%S"),
            f"{s.left.source_label} ({len(s.left)})",
            f"{s.right.source_label} ({len(s.right)})",
            str(len(s.matches)),
        )
    console.print(table)


@sessions_app.command("show")
def show_command(
    session_id: str = typer.Argument(...),
    unmatched: bool = typer.Option(False, "--unmatched", "-u", help="Also list unmatched people"),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Show the matches of a session and their differences.
    """
    _, session = _load(store, session_id)

    console.print(summary_table(session))
    console.print(matches_table(session))

    if unmatched:
        console.print(people_table(f"Unmatched in {session.left.source_label}", session.unmatched(Side.LEFT)))
        console.print(people_table(f"Unmatched in {session.right.source_label}", session.unmatched(Side.RIGHT)))


@sessions_app.command("person")
def person_command(
    session_id: str = typer.Argument(...),
    person_id: str = typer.Argument(...),
    side: str = typer.Option("left", "--side", "-s", help="left or right"),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Show one person and, if matched, the counterpart and differences.
    """
    which = parse_side(side)
    _, session = _load(store, session_id)

    person = session.person(person_id, which)
    if person is None:
        fail(f"No {which.value} person with id {person_id}")

    console.print(person_table(person))

    match = session.match_for(person_id, which)
    if match is None:
        console.print("Not matched.")
        return

    other_side = Side.RIGHT if which == Side.LEFT else Side.LEFT
    other = session.person(match.id_for(other_side), other_side)
    kind = "manual" if match.manual else "automatic"
    console.print(f"Matched ({kind}) with {match.id_for(other_side)} {other.display_name() if other else ''}")
    for diff in match.differences:
        console.print(f"  {diff}")


@sessions_app.command("match")
def match_command(
    session_id: str = typer.Argument(...),
    left_id: str = typer.Argument(...),
    right_id: str = typer.Argument(...),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Manually match two people, replacing any match either one had.
    """
    session_store, session = _load(store, session_id)

    if session.person(left_id, Side.LEFT) is None or session.person(right_id, Side.RIGHT) is None:
        fail(f"Cannot match {left_id} with {right_id}: unknown id")

    session = session.with_manual_match(left_id, right_id)
    session_store.save(session)

    match = session.match_for(left_id, Side.LEFT)
    console.print(f"Matched {left_id} <-> {right_id}")
    for diff in match.differences if match else ():
        console.print(f"  {diff}")


@sessions_app.command("unmatch")
def unmatch_command(
    session_id: str = typer.Argument(...),
    left_id: str = typer.Argument(...),
    right_id: str = typer.Argument(...),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Remove the match between two people.
    """
    session_store, session = _load(store, session_id)

    updated = session.without_match(left_id, right_id)
    if updated.matches == session.matches:
        fail(f"{left_id} and {right_id} are not matched")

    session_store.save(updated)
    console.print(f"Unmatched {left_id} <-> {right_id}")


@sessions_app.command("reset")
def reset_command(
    session_id: str = typer.Argument(...),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Recompute automatic matches. All manual matches are discarded.
    """
    session_store, session = _load(store, session_id)

    manual = sum(1 for m in session.matches if m.manual)
    if not yes:
        typer.confirm(
            f"Reset session {session_id}? {manual} manual match(es) will be lost.",
            abort=True,
        )

    session = session.reset_to_automatic()
    session_store.save(session)
    console.print(summary_table(session))


@sessions_app.command("delete")
def delete_command(
    session_id: str = typer.Argument(...),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Delete a saved session.
    """
    session_store = open_store(store)
    if not yes:
        typer.confirm(f"Delete session {session_id}?", abort=True)

    if not session_store.delete(session_id):
        fail(str(SessionNotFoundError(session_id)))
    console.print(f"Deleted session {session_id}")


@sessions_app.command("export")
def export_command(
    session_id: str = typer.Argument(...),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON"),
    store: Optional[Path] = STORE_OPTION,
):
    """
    Export a session as a JSON comparison report (stdout by default).
    """
    _, session = _load(store, session_id)
    indent = 2 if pretty else None

    if out:
        export_report_json(session, out, indent=indent)
    else:
        print(serialize_report(session, indent=indent))
