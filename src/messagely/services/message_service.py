"""Message store: create, fetch and mark-read operations.

These functions perform no authorization. Callers decide who may see or
mark a message.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session, joinedload

from messagely.core.errors import NotFoundError
from messagely.db.time import utcnow
from messagely.models import Message, User

__all__ = ["create", "get", "mark_read"]

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_MESSAGE_ID = 2**63 - 1


def _check_id(message_id: int) -> None:
    if not 1 <= message_id <= MAX_MESSAGE_ID:
        raise NotFoundError(f"No such message: {message_id}")


def create(db: Session, from_username: str, to_username: str, body: str) -> Message:
    """Store a new message sent now and return it with its generated id.

    Raises:
        NotFoundError: If the sender or the recipient does not exist.
    """
    for username in (from_username, to_username):
        if db.get(User, username) is None:
            raise NotFoundError(f"No such user: {username}")

    message = Message(
        from_username=from_username,
        to_username=to_username,
        body=body,
        sent_at=utcnow(),
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    logger.info("Message %s sent from %s to %s", message.id, from_username, to_username)
    return message


def get(db: Session, message_id: int) -> Message:
    """Return a message with its sender and recipient loaded.

    Raises:
        NotFoundError: If no message has this id.
    """
    _check_id(message_id)
    message = (
        db.query(Message)
        .options(joinedload(Message.from_user), joinedload(Message.to_user))
        .filter(Message.id == message_id)
        .first()
    )
    if message is None:
        raise NotFoundError(f"No such message: {message_id}")
    return message


def mark_read(db: Session, message_id: int) -> Message:
    """Stamp ``read_at`` with the current time.

    The read timestamp is set once; marking an already-read message again
    returns it unchanged.

    Raises:
        NotFoundError: If no message has this id.
    """
    _check_id(message_id)
    message = db.get(Message, message_id)
    if message is None:
        raise NotFoundError(f"No such message: {message_id}")
    if message.read_at is None:
        message.read_at = utcnow()
        db.commit()
        db.refresh(message)
        logger.debug("Message %s marked read", message_id)
    return message
