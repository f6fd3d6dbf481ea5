"""Cosmetic spin effect shown before a draw is committed.

The animator only decides what flickers on screen. The committed number is
picked by the draw engine after the spin has finished.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SpinFrame:
    """One displayed number.

    ``next_delay_ms`` is the wait before the following frame, or ``None`` on
    the last frame.
    """

    elapsed_ms: int
    number: int
    next_delay_ms: int | None

    @property
    def is_final(self) -> bool:
        return self.next_delay_ms is None


class SpinAnimator:
    """Frame schedule that flickers quickly, then slows down near the end."""

    def __init__(
        self,
        duration_ms: int = 2000,
        initial_interval_ms: int = 50,
        slowdown_step_ms: int = 20,
        slowdown_after: float = 0.7,
        rng: random.Random | None = None,
    ) -> None:
        if duration_ms <= 0 or initial_interval_ms <= 0:
            raise ValueError("duration_ms and initial_interval_ms must be positive")
        self.duration_ms = duration_ms
        self.initial_interval_ms = initial_interval_ms
        self.slowdown_step_ms = slowdown_step_ms
        self.slowdown_after = slowdown_after
        self._rng = rng or random.Random()

    def frames(self, remaining: Sequence[int]) -> Iterator[SpinFrame]:
        pool = list(remaining)
        if not pool:
            raise ValueError("cannot spin over an empty pool")

        elapsed = 0
        interval = self.initial_interval_ms
        slowdown_at = self.duration_ms * self.slowdown_after

        while True:
            elapsed += interval
            number = self._rng.choice(pool)

            if elapsed >= self.duration_ms:
                yield SpinFrame(elapsed_ms=elapsed, number=number, next_delay_ms=None)
                return

            if elapsed > slowdown_at:
                interval += self.slowdown_step_ms

            yield SpinFrame(elapsed_ms=elapsed, number=number, next_delay_ms=interval)

    def run(
        self,
        remaining: Sequence[int],
        on_frame: Callable[[SpinFrame], None],
        on_complete: Callable[[], None],
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Play the schedule, then call ``on_complete`` once."""

        for frame in self.frames(remaining):
            on_frame(frame)
            if frame.next_delay_ms is not None:
                sleep(frame.next_delay_ms / 1000)
        on_complete()
