"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from coinhub.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from coinhub.schemas.common import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    """New account credentials."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN, description="Email")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_identifier(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class UserSummary(CamelModel):
    """Public view of a user account (never includes the password hash)."""

    user_id: str
    username: str
    email: str
    coins: int
    role: Literal["user", "admin"]
    status: Literal["active", "suspended", "banned"]


class LoginResponse(BaseModel):
    """JWT access token and the logged-in user's summary."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: UserSummary
