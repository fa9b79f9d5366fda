
from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_compare.cli.utils import console
from gedcom_compare.loader import load_file
from gedcom_compare.records import parse_records


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
):
    """
    Show summary statistics for the individuals of a GEDCOM file.
    """
    records = parse_records(load_file(gedcom), gedcom.name)

    table = Table(title=f"{gedcom.name}")
    table.add_column("Individuals", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Total", str(len(records)))
    table.add_row("With birth date", str(sum(1 for r in records if r.birth_date)))
    table.add_row("With death date", str(sum(1 for r in records if r.death_date)))
    table.add_row(
        "With family links",
        str(sum(1 for r in records if r.spouse_family_refs or r.child_family_refs)),
    )

    console.print(table)
