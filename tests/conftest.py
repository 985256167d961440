# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from messagely.core.security import create_access_token
from messagely.db.session import Base
from messagely.db.session import get_db as app_get_session
from messagely.main import app as fastapi_app
from messagely.models import Message, User
from messagely.services import message_service, user_service

TEST_DB_URL = "sqlite://"

DEFAULT_PASSWORD = "secret-pw"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def auth_headers(username: str) -> dict[str, str]:
    """Return bearer authorization headers for ``username``."""
    return {"Authorization": f"Bearer {create_access_token(username)}"}


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that registers users through the credential store."""

    def _make_user(
        username: str,
        password: str = DEFAULT_PASSWORD,
        first_name: str | None = None,
        last_name: str = "Tester",
        phone: str = "555-0100",
    ) -> User:
        return user_service.register(
            db_session,
            username=username,
            password=password,
            first_name=first_name or username.capitalize(),
            last_name=last_name,
            phone=phone,
        )

    return _make_user


@pytest.fixture()
def alice(make_user: Callable[..., User]) -> User:
    return make_user("alice", first_name="Alice", last_name="Liddell", phone="555-0001")


@pytest.fixture()
def bob(make_user: Callable[..., User]) -> User:
    return make_user("bob", first_name="Bob", last_name="Builder", phone="555-0002")


@pytest.fixture()
def carol(make_user: Callable[..., User]) -> User:
    return make_user("carol", first_name="Carol", last_name="Danvers", phone="555-0003")


@pytest.fixture()
def alice_headers(alice: User) -> dict[str, str]:
    return auth_headers(alice.username)


@pytest.fixture()
def bob_headers(bob: User) -> dict[str, str]:
    return auth_headers(bob.username)


@pytest.fixture()
def carol_headers(carol: User) -> dict[str, str]:
    return auth_headers(carol.username)


@pytest.fixture()
def message_alice_to_bob(db_session: Session, alice: User, bob: User) -> Message:
    """A message sent by alice to bob."""
    return message_service.create(
        db_session,
        from_username=alice.username,
        to_username=bob.username,
        body="hi bob",
    )
