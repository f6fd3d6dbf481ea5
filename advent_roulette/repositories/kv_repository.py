"""Repository layer for key-value persistence."""

from __future__ import annotations

from sqlalchemy.orm import Session

from advent_roulette.models.kv_entry import KeyValueEntry


class KeyValueRepository:
    """Whole-value reads and writes against the kv_entries table."""

    def get(self, session: Session, key: str) -> str | None:
        entry = session.get(KeyValueEntry, key)
        if entry is None:
            return None
        return entry.value

    def put(self, session: Session, key: str, value: str) -> None:
        entry = session.get(KeyValueEntry, key)
        if entry is None:
            session.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        session.flush()
