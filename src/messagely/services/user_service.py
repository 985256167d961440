"""Credential store: user records, password checks and message listings."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from messagely.core import security
from messagely.core.errors import ConflictError, NotFoundError
from messagely.db.time import utcnow
from messagely.models import Message, User

__all__ = [
    "register",
    "authenticate",
    "update_login_timestamp",
    "all_users",
    "get_user",
    "messages_from",
    "messages_to",
]

logger = logging.getLogger(__name__)


def register(
    db: Session,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    phone: str,
) -> User:
    """Persist a new user with a bcrypt-hashed password.

    ``join_at`` and ``last_login_at`` are both set to the current time.

    Raises:
        ConflictError: If the username is already registered.
    """
    if db.get(User, username) is not None:
        raise ConflictError(f"Username already taken: {username}")

    now = utcnow()
    user = User(
        username=username,
        password=security.hash_password(password),
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        join_at=now,
        last_login_at=now,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        # Lost a race with a concurrent registration of the same name.
        db.rollback()
        raise ConflictError(f"Username already taken: {username}") from err
    db.refresh(user)
    logger.info("Registered user %s", username)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Return the user if ``password`` matches the stored hash, else ``None``.

    Unknown usernames and wrong passwords are both reported as ``None``;
    bad credentials never raise.
    """
    user = db.get(User, username)
    if user is None:
        logger.warning("Login failed for unknown user %s", username)
        return None
    if not security.verify_password(password, user.password):
        logger.warning("Login failed for user %s: bad password", username)
        return None
    return user


def update_login_timestamp(db: Session, username: str) -> User:
    """Set ``last_login_at`` to now.

    Raises:
        NotFoundError: If no such user exists.
    """
    user = db.get(User, username)
    if user is None:
        raise NotFoundError(f"No such user: {username}")
    user.last_login_at = utcnow()
    db.commit()
    db.refresh(user)
    return user


def all_users(db: Session) -> list[User]:
    """Return every user, ordered by username."""
    return db.query(User).order_by(User.username).all()


def get_user(db: Session, username: str) -> User:
    """Return a single user by username.

    Raises:
        NotFoundError: If no such user exists.
    """
    user = db.get(User, username)
    if user is None:
        raise NotFoundError(f"No such user: {username}")
    return user


def messages_from(db: Session, username: str) -> list[Message]:
    """Return messages sent by ``username`` with each recipient loaded."""
    return (
        db.query(Message)
        .options(joinedload(Message.to_user))
        .filter(Message.from_username == username)
        .order_by(Message.sent_at, Message.id)
        .all()
    )


def messages_to(db: Session, username: str) -> list[Message]:
    """Return messages received by ``username`` with each sender loaded."""
    return (
        db.query(Message)
        .options(joinedload(Message.from_user))
        .filter(Message.to_username == username)
        .order_by(Message.sent_at, Message.id)
        .all()
    )
