# tests/test_cli.py

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from gedcom_compare.cli import app
from gedcom_compare.cli import utils as cli_utils
from gedcom_compare.session import SessionStore
from gedcom_compare.utils import mock_file_path

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    # Keep Rich tables from wrapping ids across lines.
    monkeypatch.setattr(cli_utils.console, "width", 200)


@pytest.fixture
def store(tmp_path):
    return tmp_path / "sessions.json"


@pytest.fixture
def session_id(store):
    result = runner.invoke(
        app,
        ["compare", str(mock_file_path("left.ged")), str(mock_file_path("right.ged")), "--store", str(store)],
    )
    assert result.exit_code == 0, result.output
    (session,) = SessionStore(store).list_sessions()
    return session.id


def test_compare_saves_session(store, session_id) -> None:
    session = SessionStore(store).load(session_id)
    assert len(session.matches) == 2


def test_compare_no_individuals_fails(store) -> None:
    result = runner.invoke(
        app,
        ["compare", str(mock_file_path("left.ged")), str(mock_file_path("no_individuals.ged")), "--store", str(store)],
    )
    assert result.exit_code == 1
    assert not store.exists()


def test_compare_writes_report(tmp_path, store) -> None:
    out = tmp_path / "report.json"
    result = runner.invoke(
        app,
        [
            "compare",
            str(mock_file_path("left.ged")),
            str(mock_file_path("right.ged")),
            "--no-save",
            "--store",
            str(store),
            "--out",
            str(out),
        ],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["summary"]["matched"] == 2
    assert not store.exists()


def test_compare_report_pretty_flag(tmp_path, store) -> None:
    args = ["compare", str(mock_file_path("left.ged")), str(mock_file_path("right.ged")), "--no-save", "--store", str(store)]
    compact, pretty = tmp_path / "compact.json", tmp_path / "pretty.json"

    assert runner.invoke(app, [*args, "--out", str(compact)]).exit_code == 0
    assert runner.invoke(app, [*args, "--out", str(pretty), "--pretty"]).exit_code == 0

    assert "\n" not in compact.read_text(encoding="utf-8").strip()
    assert pretty.read_text(encoding="utf-8").startswith("{\n  ")
    assert json.loads(compact.read_text(encoding="utf-8")) == json.loads(pretty.read_text(encoding="utf-8"))


def test_stats() -> None:
    result = runner.invoke(app, ["stats", str(mock_file_path("left.ged"))])
    assert result.exit_code == 0, result.output
    assert "With birth date" in result.output


def test_sessions_list_and_show(store, session_id) -> None:
    listed = runner.invoke(app, ["sessions", "list", "--store", str(store)])
    assert listed.exit_code == 0, listed.output
    assert "left.ged" in listed.output

    shown = runner.invoke(app, ["sessions", "show", session_id, "--unmatched", "--store", str(store)])
    assert shown.exit_code == 0, shown.output
    assert "Unmatched" in shown.output


def test_sessions_unknown_id(store) -> None:
    result = runner.invoke(app, ["sessions", "show", "missing", "--store", str(store)])
    assert result.exit_code == 1


def test_sessions_match_unmatch_and_reset(store, session_id) -> None:
    matched = runner.invoke(app, ["sessions", "match", session_id, "I4", "P13", "--store", str(store)])
    assert matched.exit_code == 0, matched.output
    assert len(SessionStore(store).load(session_id).matches) == 3

    bad = runner.invoke(app, ["sessions", "match", session_id, "I4", "P999", "--store", str(store)])
    assert bad.exit_code == 1

    unmatched = runner.invoke(app, ["sessions", "unmatch", session_id, "I1", "P10", "--store", str(store)])
    assert unmatched.exit_code == 0, unmatched.output
    assert len(SessionStore(store).load(session_id).matches) == 2

    declined = runner.invoke(app, ["sessions", "reset", session_id, "--store", str(store)], input="n\n")
    assert declined.exit_code != 0
    assert any(m.manual for m in SessionStore(store).load(session_id).matches)

    reset = runner.invoke(app, ["sessions", "reset", session_id, "--yes", "--store", str(store)])
    assert reset.exit_code == 0, reset.output
    session = SessionStore(store).load(session_id)
    assert [(m.left_id, m.right_id) for m in session.matches] == [("I1", "P10"), ("I2", "P11")]


def test_sessions_person(store, session_id) -> None:
    result = runner.invoke(
        app, ["sessions", "person", session_id, "P10", "--side", "right", "--store", str(store)]
    )
    assert result.exit_code == 0, result.output
    assert "I1" in result.output
    assert "Death Place" in result.output


def test_sessions_export_stdout(store, session_id) -> None:
    result = runner.invoke(app, ["sessions", "export", session_id, "--store", str(store)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["session"]["id"] == session_id


def test_sessions_delete(store, session_id) -> None:
    result = runner.invoke(app, ["sessions", "delete", session_id, "--store", str(store)], input="y\n")
    assert result.exit_code == 0, result.output
    assert SessionStore(store).list_sessions() == []

    again = runner.invoke(app, ["sessions", "delete", session_id, "--yes", "--store", str(store)])
    assert again.exit_code == 1
