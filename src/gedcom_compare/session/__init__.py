from __future__ import annotations

from .session import ComparisonSession, create_session, now_ms, session_from_dict
from .store import SessionStore

__all__ = [
    "ComparisonSession",
    "SessionStore",
    "create_session",
    "now_ms",
    "session_from_dict",
]
