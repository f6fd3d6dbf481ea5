"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class DrawNotAllowedError(AppError):
    """A draw was requested while the pool is empty or today's draw is done."""

    def __init__(self, message: str = "Draw not allowed", details: Any | None = None) -> None:
        super().__init__(code="draw_not_allowed", message=message, status_code=409, details=details)


class ResetRejectedError(AppError):
    """Wrong reset secret."""

    def __init__(self, message: str = "Incorrect password!", details: Any | None = None) -> None:
        super().__init__(code="reset_rejected", message=message, status_code=403, details=details)


class ResetFlowError(AppError):
    """A reset step was called out of order."""

    def __init__(self, message: str = "Invalid reset step", details: Any | None = None) -> None:
        super().__init__(code="reset_flow_error", message=message, status_code=409, details=details)
