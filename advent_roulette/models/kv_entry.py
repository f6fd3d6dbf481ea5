"""Key-value slot holding serialized blobs (one row per key)."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from advent_roulette.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueEntry(Base):
    """A whole-object value stored under a string key."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )
