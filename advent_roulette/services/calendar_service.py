"""Use-cases behind the calendar page: view, spin, draw and reset."""

from __future__ import annotations

from dataclasses import dataclass

from advent_roulette.errors import DrawNotAllowedError, ResetRejectedError
from advent_roulette.services.draw_engine import DrawEngine
from advent_roulette.services.draw_state import DrawState
from advent_roulette.services.presentation import (
    PLACEHOLDER_DISPLAY,
    CalendarView,
    render_view,
    result_message,
    update_button_state,
)
from advent_roulette.services.reset_flow import ResetFlow, ResetOutcome, ResetStep
from advent_roulette.services.spin_animator import SpinAnimator, SpinFrame
from advent_roulette.services.state_store import StateStore


@dataclass(frozen=True)
class DrawResult:
    number: int
    message: str
    view: CalendarView


@dataclass(frozen=True)
class ResetResult:
    step: ResetStep
    view: CalendarView | None = None


class CalendarService:
    """Calendar use-cases. The store is passed in per call (one per request)."""

    def __init__(self, engine: DrawEngine | None = None) -> None:
        self._engine = engine or DrawEngine()

    def _ensure_can_draw(self, state: DrawState, today: str) -> None:
        if not self._engine.can_draw(state, today):
            button = update_button_state(state, today)
            raise DrawNotAllowedError(message=button.message, details={"status": button.status.value})

    def view(self, store: StateStore, today: str) -> CalendarView:
        return render_view(store.load(), today, store.total)

    def spin(self, store: StateStore, today: str, animator: SpinAnimator) -> list[SpinFrame]:
        """Frames to show while spinning. Does not change the calendar."""

        state = store.load()
        self._ensure_can_draw(state, today)
        return list(animator.frames(state.remaining))

    def draw(self, store: StateStore, today: str) -> DrawResult:
        state = store.load()
        self._ensure_can_draw(state, today)

        number, new_state = self._engine.draw(state, today)
        store.save(new_state)
        return DrawResult(
            number=number,
            message=result_message(number),
            view=render_view(new_state, today, store.total, display=str(number)),
        )

    def verify_secret(self, store: StateStore, secret: str | None, reset_secret: str) -> ResetStep:
        """First half of the reset: check the secret without touching the calendar."""

        flow = ResetFlow(store, reset_secret)
        flow.request()
        step = flow.submit_secret(secret)
        if step.outcome is ResetOutcome.REJECTED:
            raise ResetRejectedError(message=step.notice or "Incorrect password!")
        return step

    def reset(
        self,
        store: StateStore,
        today: str,
        secret: str | None,
        confirmed: bool,
        reset_secret: str,
    ) -> ResetResult:
        flow = ResetFlow(store, reset_secret)
        flow.request()
        step = flow.submit_secret(secret)
        if step.outcome is ResetOutcome.REJECTED:
            raise ResetRejectedError(message=step.notice or "Incorrect password!")
        if step.outcome is ResetOutcome.CANCELLED:
            return ResetResult(step=step)

        step = flow.confirm(confirmed)
        if step.state is None:
            return ResetResult(step=step)
        return ResetResult(
            step=step,
            view=render_view(step.state, today, store.total, display=PLACEHOLDER_DISPLAY),
        )
