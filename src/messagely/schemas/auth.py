"""Authentication request and response schemas."""

from pydantic import BaseModel, Field, field_validator

from messagely.core.security import BCRYPT_MAX_PASSWORD_BYTES


class LoginRequest(BaseModel):
    """Credentials submitted to ``POST /login``."""

    username: str = Field(..., description="Registered username")
    password: str = Field(..., description="Plaintext password")


class RegisterRequest(BaseModel):
    """Schema for new user registration."""

    username: str = Field(..., min_length=1, max_length=100, description="Unique username")
    password: str = Field(..., min_length=1, description="Plaintext password, hashed before storage")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=32)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Reject passwords bcrypt would silently truncate."""
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"
            )
        return v


class TokenResponse(BaseModel):
    """Signed access token returned after login or registration."""

    token: str = Field(..., description="JWT access token")
