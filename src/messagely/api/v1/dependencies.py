"""Shared API dependencies for authentication and common functionality."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from messagely.core.errors import UnauthorizedError
from messagely.core.security import decode_access_token
from messagely.db.session import get_db

# HTTP Bearer scheme for JWT authentication; missing credentials are
# reported through UnauthorizedError rather than FastAPI's own response.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, established once per request."""

    username: str


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Identity:
    """Verify the bearer token and return the identity it carries.

    Raises:
        UnauthorizedError: If the header is missing or the token is invalid.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return Identity(username=decode_access_token(credentials.credentials))


# Type alias for current identity dependency
CurrentIdentityDep = Annotated[Identity, Depends(get_current_identity)]


def ensure_correct_user(username: str, identity: CurrentIdentityDep) -> Identity:
    """Allow the request only when the caller is the user named in the path."""
    if identity.username != username:
        raise UnauthorizedError("You may only access your own account")
    return identity


CorrectUserDep = Annotated[Identity, Depends(ensure_correct_user)]
