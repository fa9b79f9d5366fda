
from __future__ import annotations

import typer

from gedcom_compare.cli.commands.compare import compare_command
from gedcom_compare.cli.commands.sessions import sessions_app
from gedcom_compare.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-compare",
    help="Compare two GEDCOM files and review matched individuals",
    add_completion=False,
)

app.command("compare")(compare_command)
app.command("stats")(stats_command)
app.add_typer(sessions_app, name="sessions")


def main():
    app()


if __name__ == "__main__":
    main()
