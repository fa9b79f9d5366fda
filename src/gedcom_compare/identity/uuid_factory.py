# src/gedcom_compare/identity/uuid_factory.py
from __future__ import annotations

import hashlib
import uuid
from typing import Optional


def _stable_hash(key: str) -> str:
    # SHA1 is fine for identifiers (not security).
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


def _uuid_from_key(key: str) -> str:
    """
    Convert an arbitrary key string into a canonical UUID-like value (8-4-4-4-12).
    Deterministic for the same key.
    """
    h32 = _stable_hash(key)[:32]
    return f"{h32[0:8]}-{h32[8:12]}-{h32[12:16]}-{h32[16:20]}-{h32[20:32]}"


def deterministic_uuid(*parts: object) -> str:
    key = "|".join("" if p is None else str(p) for p in parts)
    return _uuid_from_key(key)


def new_session_id(
    left_label: str,
    right_label: str,
    timestamp_ms: int,
    nonce: Optional[str] = None,
) -> str:
    """
    Identifier for a new comparison session.

    Two sessions over the same files created in the same millisecond are
    still distinct unless the caller pins ``nonce``.
    """
    if nonce is None:
        nonce = uuid.uuid4().hex
    return deterministic_uuid("SESSION", left_label, right_label, timestamp_ms, nonce)


__all__ = [
    "deterministic_uuid",
    "new_session_id",
]
