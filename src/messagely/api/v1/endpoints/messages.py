"""Message endpoints for the messagely API."""

from __future__ import annotations

from fastapi import APIRouter, status

from messagely.core.errors import UnauthorizedError
from messagely.schemas.message import (
    MessageCreate,
    MessageCreated,
    MessageCreatedResponse,
    MessageDetail,
    MessageDetailResponse,
    MessageReadReceipt,
    MessageReadResponse,
)
from messagely.services import message_service

from ..dependencies import CurrentIdentityDep, SessionDep

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/{message_id}", response_model=MessageDetailResponse)
def get_message(
    message_id: int,
    identity: CurrentIdentityDep,
    db: SessionDep,
) -> MessageDetailResponse:
    """Return a message to its sender or recipient."""
    message = message_service.get(db, message_id)
    if identity.username not in (message.from_username, message.to_username):
        raise UnauthorizedError("You are not authorized to view this message")
    return MessageDetailResponse(message=MessageDetail.model_validate(message))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MessageCreatedResponse)
def send_message(
    message_data: MessageCreate,
    identity: CurrentIdentityDep,
    db: SessionDep,
) -> MessageCreatedResponse:
    """Send a message from the caller to ``to_username``."""
    message = message_service.create(
        db,
        from_username=identity.username,
        to_username=message_data.to_username,
        body=message_data.body,
    )
    return MessageCreatedResponse(message=MessageCreated.model_validate(message))


@router.post("/{message_id}/read", response_model=MessageReadResponse)
def mark_message_read(
    message_id: int,
    identity: CurrentIdentityDep,
    db: SessionDep,
) -> MessageReadResponse:
    """Mark a message read; only its recipient may do so."""
    message = message_service.get(db, message_id)
    if identity.username != message.to_username:
        raise UnauthorizedError("Only the recipient can mark a message as read")
    message = message_service.mark_read(db, message_id)
    return MessageReadResponse(message=MessageReadReceipt.model_validate(message))
