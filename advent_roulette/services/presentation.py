"""View model for the calendar page: grid, history list and spin button."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from advent_roulette.services.draw_state import DEFAULT_TOTAL_NUMBERS, DrawState

PLACEHOLDER_DISPLAY = "?"

MSG_COMPLETE = "🎉 All numbers have been drawn! The calendar is complete!"
MSG_DRAWN_TODAY = "⏰ You have already drawn today. Come back tomorrow!"
MSG_SPINNING = "🎰 Spinning..."
MSG_RESET_DONE = "Calendar has been reset!"
MSG_RESET_REJECTED = "Incorrect password!"
PROMPT_SECRET = "Enter the password to reset the calendar:"
PROMPT_CONFIRM = "Are you sure you want to reset the calendar? All progress will be lost."


def remaining_message(count: int) -> str:
    return f"{count} numbers remaining. Good luck!"


def result_message(number: int) -> str:
    return f"🎉 Today's number is: {number}!"


class ButtonStatus(str, Enum):
    COMPLETE = "complete"
    DRAWN_TODAY = "drawn_today"
    READY = "ready"


@dataclass(frozen=True)
class NumberCell:
    number: int
    drawn: bool


@dataclass(frozen=True)
class HistoryRow:
    number: int
    date: str
    label: str


@dataclass(frozen=True)
class ButtonState:
    enabled: bool
    status: ButtonStatus
    message: str


@dataclass(frozen=True)
class CalendarView:
    display: str
    remaining_count: int
    total: int
    cells: list[NumberCell]
    history: list[HistoryRow]
    button: ButtonState


def format_day(day: str) -> str:
    """``2024-12-01`` -> ``Sun, Dec 1``. Unparseable values are shown as-is."""

    try:
        parsed = date.fromisoformat(day)
    except ValueError:
        return day
    return f"{parsed:%a}, {parsed:%b} {parsed.day}"


def render_numbers(state: DrawState, total: int = DEFAULT_TOTAL_NUMBERS) -> list[NumberCell]:
    remaining = set(state.remaining)
    return [NumberCell(number=n, drawn=n not in remaining) for n in range(1, total + 1)]


def render_history(state: DrawState) -> list[HistoryRow]:
    return [
        HistoryRow(number=entry.number, date=entry.date, label=format_day(entry.date))
        for entry in reversed(state.history)
    ]


def update_button_state(state: DrawState, today: str) -> ButtonState:
    if state.is_complete:
        return ButtonState(enabled=False, status=ButtonStatus.COMPLETE, message=MSG_COMPLETE)
    if state.last_draw_date == today:
        return ButtonState(enabled=False, status=ButtonStatus.DRAWN_TODAY, message=MSG_DRAWN_TODAY)
    return ButtonState(
        enabled=True,
        status=ButtonStatus.READY,
        message=remaining_message(len(state.remaining)),
    )


def render_view(
    state: DrawState,
    today: str,
    total: int = DEFAULT_TOTAL_NUMBERS,
    display: str | None = None,
) -> CalendarView:
    """Build the full page model; ``display`` overrides the big number."""

    if display is None:
        display = str(state.history[-1].number) if state.history else PLACEHOLDER_DISPLAY
    return CalendarView(
        display=display,
        remaining_count=len(state.remaining),
        total=total,
        cells=render_numbers(state, total),
        history=render_history(state),
        button=update_button_state(state, today),
    )
