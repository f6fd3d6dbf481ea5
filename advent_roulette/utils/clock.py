"""Access to the app's notion of "today"."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from flask import Flask, current_app

from advent_roulette.services.draw_engine import today_string


def init_clock(app: Flask, clock: Callable[[], date] | None = None) -> None:
    app.extensions["clock"] = clock or date.today


def current_day() -> str:
    """Today's local day for the running app, as ``YYYY-MM-DD``."""

    clock: Callable[[], date] = current_app.extensions.get("clock", date.today)
    return today_string(clock())
