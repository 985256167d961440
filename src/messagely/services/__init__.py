"""Business logic services for the messagely application."""

from . import message_service, user_service

__all__ = ["message_service", "user_service"]
