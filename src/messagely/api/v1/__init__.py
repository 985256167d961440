"""Version 1 API endpoints."""

from .endpoints import auth_router, messages_router, users_router
from .router import api_v1

__all__ = [
    "api_v1",
    "auth_router",
    "messages_router",
    "users_router",
]
