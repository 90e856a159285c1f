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

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class InvalidDrawSpecError(ValidationError):
    """Ball count / max number combination that cannot be drawn."""

    def __init__(self, message: str = "Invalid draw spec", details: Any | None = None) -> None:
        super().__init__(message=message, details=details)
        self.code = "invalid_draw_spec"


class RandomSourceError(AppError):
    """The random byte source could not supply the requested bytes."""

    def __init__(self, message: str = "Random source failure", details: Any | None = None) -> None:
        super().__init__(code="random_source_failure", message=message, status_code=502, details=details)


class ArithmeticInvariantError(AppError):
    """Internal consistency check failed; the draw must be aborted."""

    def __init__(self, message: str = "Arithmetic invariant violated", details: Any | None = None) -> None:
        super().__init__(
            code="arithmetic_invariant_violation",
            message=message,
            status_code=500,
            details=details,
        )
