"""Password hashing and access token helpers."""
from __future__ import annotations

from datetime import timedelta

import bcrypt
from jose import JWTError, jwt

from messagely.core.errors import UnauthorizedError
from messagely.core.settings import settings
from messagely.db.time import utcnow

# bcrypt only looks at the first 72 bytes of a secret.
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, work_factor: int | None = None) -> str:
    """Return a salted bcrypt hash of ``password``.

    Args:
        password: Plaintext password.
        work_factor: bcrypt cost; defaults to ``settings.bcrypt_work_factor``.

    Returns:
        The encoded hash, safe to store in a text column.
    """
    rounds = work_factor if work_factor is not None else settings.bcrypt_work_factor
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Compare a candidate password against a stored bcrypt hash.

    ``bcrypt.checkpw`` compares in constant time. A malformed stored hash or
    an over-long candidate counts as a mismatch; older bcrypt releases would
    otherwise truncate it to its first 72 bytes and accept it.
    """
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(username: str) -> str:
    """Create a signed JWT whose subject is ``username``."""
    issued_at = utcnow()
    to_encode: dict[str, object] = {
        "sub": username,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> str:
    """Verify ``token`` and return the username it carries.

    Raises:
        UnauthorizedError: If the signature, algorithm or expiry is invalid,
            or the token has no subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise UnauthorizedError("Could not validate credentials") from err

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        raise UnauthorizedError("Could not validate credentials")
    return username
