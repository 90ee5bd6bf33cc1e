"""Schemas for recipe reviews."""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel, strip_required
from app.schemas.recipe import AuthorSummary


class ReviewCreateRequest(CamelModel):
    rating: int = Field(..., ge=1, le=5, description="Star rating 1-5")
    comment: str = Field(..., max_length=1000)

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, v: str) -> str:
        return strip_required(v, "comment")


class ReviewResponse(CamelModel):
    id: int
    rating: int
    comment: str
    created_at: datetime | None = None
    recipe_id: int
    user_id: int
    user: AuthorSummary | None = None
