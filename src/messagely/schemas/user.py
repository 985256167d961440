"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict

from .common import UTCDateTime


class UserSummary(BaseModel):
    """Reduced user projection embedded in other representations."""

    username: str
    first_name: str
    last_name: str
    phone: str

    model_config = ConfigDict(from_attributes=True)


class UserDetail(UserSummary):
    """Full user record, minus the password hash."""

    join_at: UTCDateTime
    last_login_at: UTCDateTime | None


class UserListResponse(BaseModel):
    users: list[UserSummary]


class UserDetailResponse(BaseModel):
    user: UserDetail
