"""Typed errors raised by the store layer and the HTTP surface.

Each error carries the HTTP status it maps to; ``messagely.main`` renders
any of them as a JSON ``{"detail": ...}`` response with that status.
"""

from __future__ import annotations

from fastapi import status


class MessagelyError(RuntimeError):
    """Base exception for all expected application failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(MessagelyError):
    """Raised when a referenced user or message does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(MessagelyError):
    """Raised when a unique key (the username) is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InvalidCredentialsError(MessagelyError):
    """Raised when a login attempt fails."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid username or password"


class UnauthorizedError(MessagelyError):
    """Raised for a missing or invalid token, or a failed ownership check."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"
