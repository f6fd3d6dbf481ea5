"""Response schemas for the calendar API (spin, draw, reset)."""

from __future__ import annotations

from marshmallow import Schema, fields

from advent_roulette.schemas.state import CalendarViewSchema


class SpinFrameSchema(Schema):
    elapsed_ms = fields.Integer(required=True)
    number = fields.Integer(required=True)
    next_delay_ms = fields.Integer(required=True, allow_none=True)


class SpinResponseSchema(Schema):
    message = fields.String(required=True)
    duration_ms = fields.Integer(required=True)
    frames = fields.List(fields.Nested(SpinFrameSchema), required=True)


class DrawResponseSchema(Schema):
    number = fields.Integer(required=True)
    message = fields.String(required=True)
    view = fields.Nested(CalendarViewSchema, required=True)


class ResetResponseSchema(Schema):
    outcome = fields.String(required=True)
    prompt = fields.String(required=False, allow_none=True)
    notice = fields.String(required=False, allow_none=True)
    view = fields.Nested(CalendarViewSchema, required=False, allow_none=True)
