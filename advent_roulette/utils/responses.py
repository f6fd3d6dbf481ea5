"""JSON envelope shared by every API response: ``{success, data, error}``."""

from __future__ import annotations

from typing import Any

from flask import jsonify
from flask.typing import ResponseReturnValue


def ok(data: Any, status_code: int = 200) -> ResponseReturnValue:
    return jsonify({"success": True, "data": data, "error": None}), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> ResponseReturnValue:
    body = {
        "success": False,
        "data": None,
        "error": {"code": code, "message": message, "details": details},
    }
    return jsonify(body), status_code
