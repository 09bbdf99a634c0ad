# backend/app/core/exceptions.py
"""
Domain exceptions raised by the player service layer.

Services raise these for rejected input and missing records. The API layer
translates them into HTTP responses (see app/api/error_handlers.py); nothing
below the API layer catches them. Persistence errors (SQLAlchemy) are never
wrapped in these and propagate as-is.
"""
from typing import Any, Dict, Optional


class PlayerServiceError(Exception):
    """
    Base class for all player service errors.

    Args:
        message: Human-readable description, returned to the caller as-is.
        details: Extra structured context for logs (field name, offending value).
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ValidationError(PlayerServiceError):
    """A supplied field is missing, malformed or out of range."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(message, {"field": field, "value": value})
        self.field = field


class InvalidArgument(PlayerServiceError):
    """An id that can never reference a record (zero or negative)."""


class NotFound(PlayerServiceError):
    """The id does not reference an existing player."""
