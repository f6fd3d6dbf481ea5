from __future__ import annotations

import random

import pytest

from advent_roulette.services.spin_animator import SpinAnimator


def test_default_schedule_slows_down_and_ends_at_duration() -> None:
    frames = list(SpinAnimator(rng=random.Random(1)).frames(range(1, 25)))

    assert frames[-1].elapsed_ms == 2000
    assert frames[-1].is_final
    assert all(not f.is_final for f in frames[:-1])
    assert len(frames) == 34

    delays = [f.next_delay_ms for f in frames[:-1]]
    assert delays[:28] == [50] * 28
    assert delays[28:] == [70, 90, 110, 130, 150]


def test_frames_only_show_remaining_numbers() -> None:
    pool = [4, 8, 15]
    frames = SpinAnimator(rng=random.Random(3)).frames(pool)
    assert {f.number for f in frames} <= set(pool)


def test_empty_pool_cannot_spin() -> None:
    with pytest.raises(ValueError):
        list(SpinAnimator().frames([]))


def test_run_calls_completion_once_after_all_frames() -> None:
    animator = SpinAnimator(
        duration_ms=300, initial_interval_ms=100, slowdown_step_ms=50, slowdown_after=0.5
    )
    events: list[object] = []
    sleeps: list[float] = []

    animator.run(
        [1, 2, 3],
        on_frame=lambda frame: events.append(frame.elapsed_ms),
        on_complete=lambda: events.append("done"),
        sleep=sleeps.append,
    )

    # 200 is past the halfway mark, so the interval grows to 150; 350 ends it.
    assert events == [100, 200, 350, "done"]
    assert sleeps == [0.1, 0.15]


def test_invalid_timing_is_rejected() -> None:
    with pytest.raises(ValueError):
        SpinAnimator(duration_ms=0)
