"""
JSON-file persistence for comparison sessions.

The store file holds a JSON array of session snapshots. A store is an
explicit object owned by its caller; nothing is cached between instances.
"""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path
from typing import Any, List, Optional, Union

from gedcom_compare.logging import get_logger
from gedcom_compare.session.session import ComparisonSession, session_from_dict

log = get_logger("session_store")


class SessionStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    # ------------------------------------------------------------------ #
    # Raw file access
    # ------------------------------------------------------------------ #

    def _read_raw(self, for_write: bool = False) -> List[Any]:
        """
        Return the stored JSON array, or [] when the file is missing or unusable.

        With ``for_write`` an unusable file is first copied aside to
        ``<name>.corrupt`` so the rewrite that follows does not lose it.
        """
        if not self.path.is_file():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Unreadable session store %s: %s", self.path, exc)
            data = None
        else:
            if not isinstance(data, list):
                log.warning("Session store %s does not hold a list; ignored", self.path)
        if isinstance(data, list):
            return data
        if for_write:
            self._backup()
        return []

    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".corrupt")

    def _backup(self) -> None:
        backup = self.backup_path()
        shutil.copy2(self.path, backup)
        log.warning("Session store %s is unusable; previous content kept in %s", self.path, backup)

    def _write_raw(self, payload: List[Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def list_sessions(self) -> List[ComparisonSession]:
        """
        All saved sessions, newest first.

        Malformed content yields an empty list rather than an error.
        """
        try:
            sessions = [session_from_dict(item) for item in self._read_raw()]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            log.warning("Corrupt session data in %s: %s", self.path, exc)
            return []
        return sorted(sessions, key=lambda s: s.timestamp, reverse=True)

    def load(self, session_id: str) -> Optional[ComparisonSession]:
        for session in self.list_sessions():
            if session.id == session_id:
                return session
        return None

    def save(self, session: ComparisonSession) -> None:
        """Insert the session, or replace the stored one with the same id."""
        payload = self._read_raw(for_write=True)
        snapshot = session.to_dict()

        for index, item in enumerate(payload):
            if isinstance(item, dict) and item.get("id") == session.id:
                payload[index] = snapshot
                break
        else:
            payload.append(snapshot)

        self._write_raw(payload)
        log.info("Saved session %s to %s", session.id, self.path)

    def delete(self, session_id: str) -> bool:
        payload = self._read_raw()
        kept = [item for item in payload if not (isinstance(item, dict) and item.get("id") == session_id)]
        if len(kept) == len(payload):
            return False
        self._write_raw(kept)
        log.info("Deleted session %s from %s", session_id, self.path)
        return True
