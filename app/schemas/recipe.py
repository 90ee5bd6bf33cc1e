"""Schemas for recipes: create/update payloads and the public representation."""

from datetime import datetime

from pydantic import Field, field_validator

from app.models.recipe import Category, Difficulty
from app.schemas.base import CamelModel, strip_optional, strip_required


class AuthorSummary(CamelModel):
    """Public subset of a user embedded in recipes and reviews."""

    id: int
    username: str
    full_name: str | None = None
    profile_image: str | None = None


class RecipeWrite(CamelModel):
    """
    Body for POST and PUT /recipes.

    Null ingredient/instruction lists become empty lists. On update, a null
    difficulty, category or image keeps the stored value.
    """

    model_config = {"extra": "ignore"}

    title: str = Field(..., max_length=200)
    description: str = Field(..., max_length=1000)
    ingredients: list[str] | None = None
    instructions: list[str] | None = None
    cook_time: int = Field(..., gt=0, description="Cooking time in minutes")
    servings: int = Field(..., gt=0)
    difficulty: Difficulty | None = None
    category: Category | None = None
    image: str | None = Field(default=None, max_length=2048)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return strip_required(v, "title")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return strip_required(v, "description")

    @field_validator("ingredients", "instructions")
    @classmethod
    def validate_steps(cls, v: list[str] | None) -> list[str]:
        if v is None:
            return []
        return [item.strip() for item in v if item and item.strip()]

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str | None) -> str | None:
        return strip_optional(v)


class RecipeResponse(CamelModel):
    id: int
    title: str
    description: str
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    cook_time: int
    servings: int
    difficulty: Difficulty | None = None
    category: Category | None = None
    image: str | None = None
    author: AuthorSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    average_rating: float = 0.0
    review_count: int = 0
    like_count: int = 0

    @field_validator("ingredients", "instructions", mode="before")
    @classmethod
    def none_to_empty(cls, v: list[str] | None) -> list[str]:
        return v or []
