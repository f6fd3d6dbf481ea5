"""Owner of the persisted calendar state."""

from __future__ import annotations

import json
import logging

from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.orm import Session

from advent_roulette.repositories.kv_repository import KeyValueRepository
from advent_roulette.schemas.state import DrawStateSchema
from advent_roulette.services.draw_state import DEFAULT_TOTAL_NUMBERS, DrawState

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "adventRouletteState"

_schema = DrawStateSchema()


class StateStore:
    """Loads, saves and resets the single persisted :class:`DrawState`.

    The whole state lives in one key-value row and is always read and
    written as one JSON document.
    """

    def __init__(
        self,
        session: Session,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        total: int = DEFAULT_TOTAL_NUMBERS,
        repository: KeyValueRepository | None = None,
    ) -> None:
        self._session = session
        self._key = key
        self._total = total
        self._repo = repository or KeyValueRepository()

    @property
    def total(self) -> int:
        return self._total

    def load(self) -> DrawState:
        """Return the stored state, replacing missing or corrupt data with a fresh one."""

        raw = self._repo.get(self._session, self._key)
        if raw is None:
            logger.info("No saved calendar under %r; starting fresh", self._key)
            return self.reset()

        try:
            state = self._decode(raw)
        except (ValueError, TypeError, MarshmallowValidationError) as exc:
            logger.warning("Discarding unreadable calendar state under %r: %s", self._key, exc)
            return self.reset()

        return state

    def save(self, state: DrawState) -> None:
        self._repo.put(self._session, self._key, json.dumps(_schema.dump(state)))

    def reset(self) -> DrawState:
        state = DrawState.fresh(self._total)
        self.save(state)
        return state

    def _decode(self, raw: str) -> DrawState:
        try:
            payload = json.loads(raw)
        except RecursionError as exc:
            raise ValueError("saved state is nested too deeply") from exc
        if not isinstance(payload, dict):
            raise ValueError("saved state must be a JSON object")
        state: DrawState = _schema.load(payload)
        state.check(self._total)
        return state
