"""Calendar API routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from advent_roulette.db import get_session
from advent_roulette.schemas.calendar import (
    DrawResponseSchema,
    ResetResponseSchema,
    SpinResponseSchema,
)
from advent_roulette.schemas.reset import ResetRequestSchema, VerifySecretSchema
from advent_roulette.schemas.state import CalendarViewSchema
from advent_roulette.services.calendar_service import CalendarService
from advent_roulette.services.presentation import MSG_SPINNING
from advent_roulette.services.spin_animator import SpinAnimator
from advent_roulette.services.state_store import StateStore
from advent_roulette.utils.clock import current_day
from advent_roulette.utils.responses import ok

calendar_bp = Blueprint("calendar", __name__)

_view_schema = CalendarViewSchema()
_spin_schema = SpinResponseSchema()
_draw_schema = DrawResponseSchema()
_reset_schema = ResetResponseSchema()
_verify_request_schema = VerifySecretSchema()
_reset_request_schema = ResetRequestSchema()
_service = CalendarService()


def get_store() -> StateStore:
    """State store bound to the current request's session."""

    return StateStore(
        get_session(),
        key=str(current_app.config["STORAGE_KEY"]),
        total=int(current_app.config["TOTAL_NUMBERS"]),
    )


def _animator() -> SpinAnimator:
    cfg = current_app.config
    return SpinAnimator(
        duration_ms=int(cfg["SPIN_DURATION_MS"]),
        initial_interval_ms=int(cfg["SPIN_INITIAL_INTERVAL_MS"]),
        slowdown_step_ms=int(cfg["SPIN_SLOWDOWN_STEP_MS"]),
        slowdown_after=float(cfg["SPIN_SLOWDOWN_AFTER"]),
    )


@calendar_bp.get("/state")
def get_state():
    """Current grid, history and button state."""

    view = _service.view(get_store(), current_day())
    return ok(_view_schema.dump(view))


@calendar_bp.post("/spin")
def spin():
    """Frame schedule for the spin animation. Nothing is committed."""

    animator = _animator()
    frames = _service.spin(get_store(), current_day(), animator)
    return ok(
        _spin_schema.dump(
            {"message": MSG_SPINNING, "duration_ms": animator.duration_ms, "frames": frames}
        )
    )


@calendar_bp.post("/draw")
def draw():
    """Pick, record and persist today's number."""

    result = _service.draw(get_store(), current_day())
    return ok(_draw_schema.dump(result), status_code=201)


@calendar_bp.post("/reset/verify")
def verify_reset_secret():
    payload = request.get_json(silent=True) or {}
    data = _verify_request_schema.load(payload)

    step = _service.verify_secret(
        get_store(),
        data["secret"],
        str(current_app.config["RESET_SECRET"]),
    )
    return ok(
        _reset_schema.dump(
            {"outcome": step.outcome.value, "prompt": step.prompt, "notice": step.notice, "view": None}
        )
    )


@calendar_bp.post("/reset")
def reset():
    """Run the whole reset: secret check, confirmation, wipe."""

    payload = request.get_json(silent=True) or {}
    data = _reset_request_schema.load(payload)

    result = _service.reset(
        get_store(),
        current_day(),
        secret=data["secret"],
        confirmed=bool(data["confirmed"]),
        reset_secret=str(current_app.config["RESET_SECRET"]),
    )
    return ok(
        _reset_schema.dump(
            {
                "outcome": result.step.outcome.value,
                "prompt": result.step.prompt,
                "notice": result.step.notice,
                "view": result.view,
            }
        )
    )
