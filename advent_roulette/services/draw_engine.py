"""Business rules for the once-a-day draw."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from datetime import date

from advent_roulette.errors import DrawNotAllowedError, ValidationError
from advent_roulette.services.draw_state import DrawState, HistoryEntry

logger = logging.getLogger(__name__)


def today_string(today: date | None = None) -> str:
    """Local calendar day as ``YYYY-MM-DD``."""

    return (today or date.today()).isoformat()


class DrawEngine:
    """Eligibility check, random pick and state transition for a draw."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @staticmethod
    def has_drawn_today(state: DrawState, today: str) -> bool:
        return state.last_draw_date == today

    def can_draw(self, state: DrawState, today: str) -> bool:
        return bool(state.remaining) and not self.has_drawn_today(state, today)

    def pick_random(self, state: DrawState) -> int:
        if not state.remaining:
            raise DrawNotAllowedError(message="No numbers remaining")
        return self._rng.choice(state.remaining)

    def apply_draw(self, state: DrawState, number: int, today: str) -> DrawState:
        """Move ``number`` from the pool into history, dated ``today``.

        Raises
        ------
        DrawNotAllowedError
            When the pool is empty or a draw already happened on ``today``.
        ValidationError
            When ``number`` is not in the remaining pool.
        """

        if not state.remaining:
            raise DrawNotAllowedError(message="All numbers have been drawn")
        if self.has_drawn_today(state, today):
            raise DrawNotAllowedError(message="Already drawn today", details={"date": today})
        if number not in state.remaining:
            raise ValidationError(
                message="Number is not in the remaining pool",
                details={"number": [f"{number} was already drawn or is out of range"]},
            )

        new_state = replace(
            state,
            remaining=tuple(n for n in state.remaining if n != number),
            history=(*state.history, HistoryEntry(number=number, date=today)),
            last_draw_date=today,
        )
        logger.info("Drew %s on %s (%s remaining)", number, today, len(new_state.remaining))
        return new_state

    def draw(self, state: DrawState, today: str) -> tuple[int, DrawState]:
        """Pick and apply in one step."""

        if not self.can_draw(state, today):
            raise DrawNotAllowedError(
                message="All numbers have been drawn" if not state.remaining else "Already drawn today",
                details={"date": today},
            )
        number = self.pick_random(state)
        return number, self.apply_draw(state, number, today)
