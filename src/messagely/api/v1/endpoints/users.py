"""User lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from messagely.schemas.message import (
    ReceivedMessage,
    ReceivedMessagesResponse,
    SentMessage,
    SentMessagesResponse,
)
from messagely.schemas.user import (
    UserDetail,
    UserDetailResponse,
    UserListResponse,
    UserSummary,
)
from messagely.services import user_service

from ..dependencies import CorrectUserDep, CurrentIdentityDep, SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(identity: CurrentIdentityDep, db: SessionDep) -> UserListResponse:
    """List basic info on all users."""
    users = user_service.all_users(db)
    return UserListResponse(users=[UserSummary.model_validate(user) for user in users])


@router.get("/{username}", response_model=UserDetailResponse)
def get_user(username: str, identity: CorrectUserDep, db: SessionDep) -> UserDetailResponse:
    """Return the caller's own full record."""
    user = user_service.get_user(db, username)
    return UserDetailResponse(user=UserDetail.model_validate(user))


@router.get("/{username}/to", response_model=ReceivedMessagesResponse)
def get_messages_to(
    username: str,
    identity: CorrectUserDep,
    db: SessionDep,
) -> ReceivedMessagesResponse:
    """Return messages sent to the caller, each with the sender's summary."""
    messages = user_service.messages_to(db, username)
    return ReceivedMessagesResponse(
        messages=[ReceivedMessage.model_validate(message) for message in messages]
    )


@router.get("/{username}/from", response_model=SentMessagesResponse)
def get_messages_from(
    username: str,
    identity: CorrectUserDep,
    db: SessionDep,
) -> SentMessagesResponse:
    """Return messages sent by the caller, each with the recipient's summary."""
    messages = user_service.messages_from(db, username)
    return SentMessagesResponse(
        messages=[SentMessage.model_validate(message) for message in messages]
    )
