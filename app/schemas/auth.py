"""Request/response schemas for auth endpoints."""

from pydantic import EmailStr, Field, field_validator

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.schemas.base import CamelModel, strip_optional, strip_required


class SignupRequest(CamelModel):
    """New account details."""

    username: str = Field(
        ..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN, description="Username"
    )
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    full_name: str | None = Field(default=None, max_length=100, description="Display name")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = strip_required(v, "username")
        if len(v) < USERNAME_MIN_LEN:
            raise ValueError(f"username must be at least {USERNAME_MIN_LEN} characters")
        if any(c.isspace() for c in v):
            raise ValueError("username must not contain whitespace")
        return v

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str | None) -> str | None:
        return strip_optional(v)


class LoginRequest(CamelModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class AuthResponse(CamelModel):
    """Token plus the identity it was issued for. token is null on /auth/me."""

    token: str | None = Field(default=None, description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user_id: int
    username: str
    email: str
    full_name: str | None = None


class CurrentUser(CamelModel):
    """Authenticated identity (id, username, email) for dependency injection."""

    id: int
    username: str
    email: str
