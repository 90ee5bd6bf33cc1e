"""Schemas for user profiles. Password hashes never appear here."""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel, strip_optional


class UserProfile(CamelModel):
    id: int
    username: str
    email: str
    full_name: str | None = None
    bio: str | None = None
    profile_image: str | None = None
    created_at: datetime | None = None


class UserUpdateRequest(CamelModel):
    """Profile edit. Omitted or null fields keep their current value."""

    full_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    profile_image: str | None = Field(default=None, max_length=2048)

    @field_validator("full_name", "bio", "profile_image")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return strip_optional(v)
