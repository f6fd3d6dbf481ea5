"""ORM models."""

from advent_roulette.models.kv_entry import KeyValueEntry

__all__ = ["KeyValueEntry"]
