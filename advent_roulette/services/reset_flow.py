"""Password-gated, confirmed reset of the calendar.

The secret only keeps casual visitors from wiping the calendar by accident.
Anyone with access to the configuration can read it, so it must never be
treated as access control.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from advent_roulette.errors import ResetFlowError
from advent_roulette.services.draw_state import DrawState
from advent_roulette.services.presentation import (
    MSG_RESET_DONE,
    MSG_RESET_REJECTED,
    PROMPT_CONFIRM,
    PROMPT_SECRET,
)

logger = logging.getLogger(__name__)


class ResettableStore(Protocol):
    def reset(self) -> DrawState: ...


class ResetState(str, Enum):
    IDLE = "idle"
    AWAITING_SECRET = "awaiting_secret"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    APPLIED = "applied"


class ResetOutcome(str, Enum):
    PENDING = "pending"
    CANCELLED = "cancelled"
    REJECTED = "rejected"
    APPLIED = "applied"


@dataclass(frozen=True)
class ResetStep:
    """Result of one transition.

    ``prompt`` is the next question to ask (if any), ``notice`` the message to
    show the user, ``state`` the fresh calendar once the reset is applied.
    """

    outcome: ResetOutcome
    prompt: str | None = None
    notice: str | None = None
    state: DrawState | None = None


class ResetFlow:
    """IDLE -> AWAITING_SECRET -> AWAITING_CONFIRMATION -> APPLIED."""

    def __init__(self, store: ResettableStore, secret: str) -> None:
        self._store = store
        self._secret = secret
        self.state = ResetState.IDLE

    def _expect(self, expected: ResetState) -> None:
        if self.state is not expected:
            raise ResetFlowError(
                message=f"Reset step not allowed in state {self.state.value}",
                details={"expected": expected.value, "actual": self.state.value},
            )

    def request(self) -> ResetStep:
        if self.state is ResetState.APPLIED:
            self.state = ResetState.IDLE
        self._expect(ResetState.IDLE)
        self.state = ResetState.AWAITING_SECRET
        return ResetStep(outcome=ResetOutcome.PENDING, prompt=PROMPT_SECRET)

    def submit_secret(self, value: str | None) -> ResetStep:
        self._expect(ResetState.AWAITING_SECRET)

        if value is None:
            self.state = ResetState.IDLE
            return ResetStep(outcome=ResetOutcome.CANCELLED)

        if value != self._secret:
            logger.info("Reset rejected: wrong secret")
            self.state = ResetState.IDLE
            return ResetStep(outcome=ResetOutcome.REJECTED, notice=MSG_RESET_REJECTED)

        self.state = ResetState.AWAITING_CONFIRMATION
        return ResetStep(outcome=ResetOutcome.PENDING, prompt=PROMPT_CONFIRM)

    def confirm(self, accepted: bool) -> ResetStep:
        self._expect(ResetState.AWAITING_CONFIRMATION)

        if not accepted:
            self.state = ResetState.IDLE
            return ResetStep(outcome=ResetOutcome.CANCELLED)

        fresh = self._store.reset()
        self.state = ResetState.APPLIED
        logger.info("Calendar reset")
        return ResetStep(outcome=ResetOutcome.APPLIED, notice=MSG_RESET_DONE, state=fresh)
