"""Application-level exception types.

This module defines the error taxonomy shared by the domain, the services
and the HTTP layer, enabling consistent error handling, logging, and API
responses. The HTTP status of an error is decided by which of the
category classes below it derives from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability and clients.

    Fields are optional to keep shapes consistent without forcing every
    error to carry every field.
    """

    hint: str
    min_value: int
    max_value: int
    actual_value: int | str
    cheese: str
    user_id: str
    key: str
    request_id: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        # Populate Exception args so str(error) is useful in logs/tracebacks.
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when an input value is rejected."""


class NotFoundAppError(AppError):
    """Raised when a referenced entity does not exist."""


class ConflictAppError(AppError):
    """Raised when a write would break a uniqueness invariant."""
