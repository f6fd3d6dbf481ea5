from __future__ import annotations

import pytest

from advent_roulette.services.draw_state import DrawState, HistoryEntry


def test_fresh_state() -> None:
    state = DrawState.fresh()
    assert state.remaining == tuple(range(1, 25))
    assert state.history == ()
    assert state.last_draw_date is None
    state.check()


@pytest.mark.parametrize(
    "state",
    [
        DrawState(remaining=tuple(range(1, 24)), history=(), last_draw_date=None),
        DrawState(remaining=(1, 1, *range(3, 25)), history=(HistoryEntry(2, "2024-12-01"),), last_draw_date="2024-12-01"),
        DrawState(remaining=tuple(range(1, 25)), history=(HistoryEntry(1, "2024-12-01"),), last_draw_date="2024-12-01"),
        DrawState(remaining=tuple(range(2, 25)), history=(HistoryEntry(1, "2024-12-01"),), last_draw_date="2024-12-02"),
        DrawState(remaining=tuple(range(1, 25)), history=(), last_draw_date="2024-12-01"),
    ],
    ids=["missing-number", "duplicate", "overlap", "stale-last-date", "date-without-history"],
)
def test_check_rejects_broken_states(state: DrawState) -> None:
    with pytest.raises(ValueError):
        state.check()
