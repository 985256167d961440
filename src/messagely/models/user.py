"""SQLAlchemy model for registered users."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from messagely.db.session import Base
from messagely.db.time import utcnow

if TYPE_CHECKING:
    from .message import Message


class User(Base):
    """A registered user, keyed by username.

    ``password`` holds a bcrypt hash, never the plaintext.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, primary_key=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    join_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    sent_messages: Mapped[list[Message]] = relationship(
        "Message",
        back_populates="from_user",
        foreign_keys="Message.from_username",
    )
    received_messages: Mapped[list[Message]] = relationship(
        "Message",
        back_populates="to_user",
        foreign_keys="Message.to_username",
    )

    def __repr__(self) -> str:
        return f"<User {self.username}>"
