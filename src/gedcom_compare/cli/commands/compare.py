from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_compare.cli.utils import console, fail, matches_table, summary_table
from gedcom_compare.config import get_config
from gedcom_compare.core import CompareContext, Pipeline, PipelineError
from gedcom_compare.logging import get_logger

log = get_logger("cli.compare")


def compare_command(
    left: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    right: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the JSON comparison report to this file",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print the JSON report"),
    save: bool = typer.Option(
        True,
        "--save/--no-save",
        help="Store the session for later review",
    ),
    store: Optional[Path] = typer.Option(
        None,
        "--store",
        help="Session store file (defaults to paths.sessions_file)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List every match with its differences",
    ),
):
    """
    Compare two GEDCOM files and auto-match their individuals.
    """
    cfg = get_config()
    ctx = CompareContext(
        config=cfg,
        logger=log,
        left_path=str(left),
        right_path=str(right),
        output_path=str(out) if out else None,
        store_path=str(store) if store else None,
        save=save,
        pretty=pretty,
        debug=cfg.debug,
    )

    try:
        session = Pipeline(ctx).run()
    except PipelineError as exc:
        fail(str(exc))

    console.print(summary_table(session))
    if verbose:
        console.print(matches_table(session))

    if save:
        console.print(f"Saved session [bold]{session.id}[/bold]")
    if out:
        console.print(f"Report written to {out}")
