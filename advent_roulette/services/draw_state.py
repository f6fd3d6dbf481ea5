"""The calendar's state value: remaining pool, draw history and last draw day."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_TOTAL_NUMBERS = 24


@dataclass(frozen=True)
class HistoryEntry:
    number: int
    date: str


@dataclass(frozen=True)
class DrawState:
    """Snapshot of the calendar.

    Attributes
    ----------
    remaining : tuple[int, ...]
        Numbers not drawn yet, ascending.
    history : tuple[HistoryEntry, ...]
        Draws in the order they happened (oldest first).
    last_draw_date : str | None
        ISO day of the most recent draw; ``None`` before the first draw.
    """

    remaining: tuple[int, ...]
    history: tuple[HistoryEntry, ...] = field(default_factory=tuple)
    last_draw_date: str | None = None

    @classmethod
    def fresh(cls, total: int = DEFAULT_TOTAL_NUMBERS) -> "DrawState":
        return cls(remaining=tuple(range(1, total + 1)), history=(), last_draw_date=None)

    @property
    def drawn_numbers(self) -> list[int]:
        return [entry.number for entry in self.history]

    @property
    def is_complete(self) -> bool:
        return not self.remaining

    def check(self, total: int = DEFAULT_TOTAL_NUMBERS) -> None:
        """Raise ``ValueError`` if the pool and history do not partition 1..total."""

        remaining = list(self.remaining)
        drawn = self.drawn_numbers

        if len(set(remaining)) != len(remaining):
            raise ValueError("remaining numbers must be unique")
        if len(set(drawn)) != len(drawn):
            raise ValueError("history numbers must be unique")
        if set(remaining) & set(drawn):
            raise ValueError("a number is both remaining and drawn")
        if set(remaining) | set(drawn) != set(range(1, total + 1)):
            raise ValueError(f"numbers must cover exactly 1..{total}")

        if self.history:
            if self.last_draw_date != self.history[-1].date:
                raise ValueError("last_draw_date must match the latest history entry")
        elif self.last_draw_date is not None:
            raise ValueError("last_draw_date must be empty when history is empty")
