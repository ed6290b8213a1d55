"""Domain errors raised by services and dependencies.

Each error carries the HTTP status it maps to; the handlers registered in
``app.main`` turn them into the ``{"status": "error", "message": ...}`` envelope.
"""
from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class ConflictError(AppError):
    """A unique field already holds the submitted value."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} already in use!")


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"
