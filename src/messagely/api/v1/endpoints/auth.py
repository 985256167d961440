"""Authentication endpoints for the messagely API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from messagely.core.errors import InvalidCredentialsError
from messagely.core.security import create_access_token
from messagely.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from messagely.services import user_service

from ..dependencies import SessionDep

router = APIRouter(tags=["authentication"])

logger = logging.getLogger(__name__)


@router.post(
    "/login",
    summary="Log in with username and password",
    status_code=status.HTTP_200_OK,
    response_model=TokenResponse,
)
def login(payload: LoginRequest, db: SessionDep) -> TokenResponse:
    """Exchange valid credentials for a token and record the login time."""
    user = user_service.authenticate(db, payload.username, payload.password)
    if user is None:
        raise InvalidCredentialsError("Invalid username or password")

    token = create_access_token(user.username)
    user_service.update_login_timestamp(db, user.username)
    logger.info("User %s logged in", user.username)
    return TokenResponse(token=token)


@router.post(
    "/register",
    summary="Register a new user",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenResponse,
)
def register(payload: RegisterRequest, db: SessionDep) -> TokenResponse:
    """Register, log in, and return a token for the new user."""
    user = user_service.register(
        db,
        username=payload.username,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
    )
    token = create_access_token(user.username)
    user_service.update_login_timestamp(db, user.username)
    return TokenResponse(token=token)
