from __future__ import annotations

from datetime import date, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from advent_roulette import create_app
from advent_roulette.models.base import Base
from advent_roulette.services.state_store import StateStore


class FakeClock:
    """Settable stand-in for ``date.today``."""

    def __init__(self, start: date) -> None:
        self.today = start

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> None:
        self.today = self.today + timedelta(days=days)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(date(2024, 12, 1))


@pytest.fixture
def app(tmp_path, clock):
    app = create_app(
        overrides={
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'advent.db'}",
            "RESET_SECRET": "advent2024",
            "STORAGE_KEY": "adventRouletteState",
            "TOTAL_NUMBERS": 24,
            # Keep the spin schedule short; the browser plays it, not the tests.
            "SPIN_DURATION_MS": 200,
        },
        clock=clock,
    )
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'store.db'}", future=True)
    Base.metadata.create_all(bind=engine)
    with Session(engine) as s:
        yield s
    engine.dispose()


@pytest.fixture
def store(session) -> StateStore:
    return StateStore(session)
