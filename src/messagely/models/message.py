"""Models describing text messages between users."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from messagely.db.session import Base
from messagely.db.time import utcnow

from .user import User


class Message(Base):
    """Plain-text message sent from one user to another.

    ``read_at`` stays null until the recipient marks the message read.
    """

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    from_username: Mapped[str] = mapped_column(
        Text, ForeignKey("users.username"), nullable=False, index=True
    )
    to_username: Mapped[str] = mapped_column(
        Text, ForeignKey("users.username"), nullable=False, index=True
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    sent_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    from_user: Mapped[User] = relationship(
        "User",
        back_populates="sent_messages",
        foreign_keys=[from_username],
    )
    to_user: Mapped[User] = relationship(
        "User",
        back_populates="received_messages",
        foreign_keys=[to_username],
    )
