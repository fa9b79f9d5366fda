# tests/test_session_store.py

from __future__ import annotations

import json

from gedcom_compare.matching import Side
from gedcom_compare.session import SessionStore, create_session


def _session(make_person, make_set, session_id, timestamp):
    left = make_set("a.ged", make_person("I1", "John Smith", "1900"), make_person("I2", "Ann Lee"))
    right = make_set("b.ged", make_person("P1", "Jon Smith", "1900"), make_person("P2", "Ann Lee"))
    return create_session(left, right, session_id=session_id, timestamp=timestamp)


def test_missing_store_lists_nothing(tmp_path) -> None:
    store = SessionStore(tmp_path / "sessions.json")
    assert store.list_sessions() == []
    assert store.load("nope") is None


def test_save_load_round_trip(tmp_path, make_person, make_set) -> None:
    store = SessionStore(tmp_path / "nested" / "sessions.json")
    session = _session(make_person, make_set, "s1", 1000).with_manual_match("I2", "P2")

    store.save(session)
    loaded = store.load("s1")

    assert loaded == session
    assert loaded.match_for("I2", Side.LEFT).manual is True


def test_save_replaces_existing_session(tmp_path, make_person, make_set) -> None:
    store = SessionStore(tmp_path / "sessions.json")
    session = _session(make_person, make_set, "s1", 1000)
    store.save(session)
    store.save(session.without_match("I1", "P1"))

    sessions = store.list_sessions()
    assert len(sessions) == 1
    assert sessions[0].matches == ()


def test_list_sessions_newest_first(tmp_path, make_person, make_set) -> None:
    store = SessionStore(tmp_path / "sessions.json")
    store.save(_session(make_person, make_set, "old", 1000))
    store.save(_session(make_person, make_set, "new", 3000))
    store.save(_session(make_person, make_set, "mid", 2000))

    assert [s.id for s in store.list_sessions()] == ["new", "mid", "old"]


def test_delete(tmp_path, make_person, make_set) -> None:
    store = SessionStore(tmp_path / "sessions.json")
    store.save(_session(make_person, make_set, "s1", 1000))
    store.save(_session(make_person, make_set, "s2", 2000))

    assert store.delete("s1") is True
    assert store.delete("s1") is False
    assert [s.id for s in store.list_sessions()] == ["s2"]


def test_corrupt_store_degrades_to_empty(tmp_path) -> None:
    path = tmp_path / "sessions.json"
    store = SessionStore(path)

    path.write_text("{not json", encoding="utf-8")
    assert store.list_sessions() == []

    path.write_text(json.dumps({"id": "x"}), encoding="utf-8")
    assert store.list_sessions() == []

    path.write_text(json.dumps([{"id": "x"}]), encoding="utf-8")
    assert store.list_sessions() == []
    assert store.load("x") is None


def test_save_over_unreadable_store_keeps_a_copy(tmp_path, make_person, make_set) -> None:
    path = tmp_path / "sessions.json"
    path.write_text("{not json", encoding="utf-8")
    store = SessionStore(path)

    store.save(_session(make_person, make_set, "s1", 1000))

    assert store.backup_path().read_text(encoding="utf-8") == "{not json"
    assert [s.id for s in store.list_sessions()] == ["s1"]


def test_save_to_healthy_store_makes_no_copy(tmp_path, make_person, make_set) -> None:
    store = SessionStore(tmp_path / "sessions.json")
    store.save(_session(make_person, make_set, "s1", 1000))
    store.save(_session(make_person, make_set, "s2", 2000))
    assert not store.backup_path().exists()
