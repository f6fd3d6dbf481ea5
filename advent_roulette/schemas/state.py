"""Schemas for the persisted calendar blob and the calendar view."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from advent_roulette.services.draw_state import DrawState, HistoryEntry
from advent_roulette.services.presentation import ButtonStatus

_ISO_DAY = validate.Regexp(r"^\d{4}-\d{2}-\d{2}$", error="Expected a YYYY-MM-DD day")


class HistoryEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    number = fields.Integer(required=True, strict=True, validate=validate.Range(min=1))
    date = fields.String(required=True, validate=_ISO_DAY)

    @post_load
    def _make_entry(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return HistoryEntry(number=int(data["number"]), date=str(data["date"]))


class DrawStateSchema(Schema):
    """Persisted shape: ``remainingNumbers``, ``history``, ``lastDrawDate``."""

    class Meta:
        # Extra keys are dropped rather than discarding the saved progress.
        unknown = EXCLUDE

    remaining = fields.List(
        fields.Integer(strict=True, validate=validate.Range(min=1)),
        required=True,
        data_key="remainingNumbers",
    )
    history = fields.List(fields.Nested(HistoryEntrySchema), required=True)
    last_draw_date = fields.String(
        required=False,
        allow_none=True,
        load_default=None,
        validate=_ISO_DAY,
        data_key="lastDrawDate",
    )

    @post_load
    def _make_state(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return DrawState(
            remaining=tuple(sorted(int(n) for n in data["remaining"])),
            history=tuple(data["history"]),
            last_draw_date=data.get("last_draw_date"),
        )


class NumberCellSchema(Schema):
    number = fields.Integer(required=True)
    drawn = fields.Boolean(required=True)


class HistoryRowSchema(Schema):
    number = fields.Integer(required=True)
    date = fields.String(required=True)
    label = fields.String(required=True)


class ButtonStateSchema(Schema):
    enabled = fields.Boolean(required=True)
    status = fields.Enum(ButtonStatus, by_value=True, required=True)
    message = fields.String(required=True)


class CalendarViewSchema(Schema):
    display = fields.String(required=True)
    remaining_count = fields.Integer(required=True)
    total = fields.Integer(required=True)
    cells = fields.List(fields.Nested(NumberCellSchema), required=True)
    history = fields.List(fields.Nested(HistoryRowSchema), required=True)
    button = fields.Nested(ButtonStateSchema, required=True)
