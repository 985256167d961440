"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .auth import LoginRequest, RegisterRequest, TokenResponse
from .message import (
    MessageCreate,
    MessageCreated,
    MessageCreatedResponse,
    MessageDetail,
    MessageDetailResponse,
    MessageReadReceipt,
    MessageReadResponse,
    ReceivedMessage,
    ReceivedMessagesResponse,
    SentMessage,
    SentMessagesResponse,
)
from .user import UserDetail, UserDetailResponse, UserListResponse, UserSummary

__all__ = [
    "LoginRequest", "RegisterRequest", "TokenResponse",
    "MessageCreate", "MessageCreated", "MessageCreatedResponse",
    "MessageDetail", "MessageDetailResponse",
    "MessageReadReceipt", "MessageReadResponse",
    "SentMessage", "SentMessagesResponse",
    "ReceivedMessage", "ReceivedMessagesResponse",
    "UserSummary", "UserDetail", "UserListResponse", "UserDetailResponse",
]
