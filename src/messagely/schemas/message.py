"""Message-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .common import UTCDateTime
from .user import UserSummary


class MessageCreate(BaseModel):
    """Schema for sending a message; the sender is the authenticated user."""

    to_username: str = Field(..., min_length=1, description="Recipient username")
    body: str = Field(..., min_length=1, description="Message text")


class MessageCreated(BaseModel):
    """A freshly stored message."""

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: UTCDateTime

    model_config = ConfigDict(from_attributes=True)


class MessageDetail(BaseModel):
    """A message with both parties' summaries."""

    id: int
    body: str
    sent_at: UTCDateTime
    read_at: UTCDateTime | None
    from_user: UserSummary
    to_user: UserSummary

    model_config = ConfigDict(from_attributes=True)


class MessageReadReceipt(BaseModel):
    """Result of marking a message read."""

    id: int
    read_at: UTCDateTime | None

    model_config = ConfigDict(from_attributes=True)


class SentMessage(BaseModel):
    """A message in the sender's listing, annotated with the recipient."""

    id: int
    to_user: UserSummary
    body: str
    sent_at: UTCDateTime
    read_at: UTCDateTime | None

    model_config = ConfigDict(from_attributes=True)


class ReceivedMessage(BaseModel):
    """A message in the recipient's listing, annotated with the sender."""

    id: int
    from_user: UserSummary
    body: str
    sent_at: UTCDateTime
    read_at: UTCDateTime | None

    model_config = ConfigDict(from_attributes=True)


class MessageCreatedResponse(BaseModel):
    message: MessageCreated


class MessageDetailResponse(BaseModel):
    message: MessageDetail


class MessageReadResponse(BaseModel):
    message: MessageReadReceipt


class SentMessagesResponse(BaseModel):
    messages: list[SentMessage]


class ReceivedMessagesResponse(BaseModel):
    messages: list[ReceivedMessage]
