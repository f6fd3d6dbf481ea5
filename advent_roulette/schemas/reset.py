"""Request schemas for the reset endpoints."""

from __future__ import annotations

from marshmallow import Schema, fields


class VerifySecretSchema(Schema):
    # null means the user dismissed the password prompt.
    secret = fields.String(required=True, allow_none=True)


class ResetRequestSchema(Schema):
    secret = fields.String(required=True, allow_none=True)
    confirmed = fields.Boolean(required=False, load_default=False)
