"""Database engine and per-request session management."""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from messagely.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


_connect_args: dict[str, object] = {}
if settings.effective_database_url.startswith("sqlite"):
    # Endpoints run in FastAPI's threadpool; sessions never cross threads.
    _connect_args["check_same_thread"] = False

engine = create_engine(
    settings.effective_database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Ensure model modules are imported so that metadata is populated when create_all runs.
import messagely.models  # noqa: E402,F401


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=engine)
