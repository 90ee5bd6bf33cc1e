"""ORM model for recipes."""

import enum

from sqlalchemy import JSON, Column, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.models.base import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Difficulty(str, enum.Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Category(str, enum.Enum):
    MAIN_COURSE = "MAIN_COURSE"
    DESSERT = "DESSERT"
    HEALTHY = "HEALTHY"
    BREAKFAST = "BREAKFAST"
    SNACK = "SNACK"
    APPETIZER = "APPETIZER"
    SOUP = "SOUP"
    SALAD = "SALAD"


class Recipe(Base):
    """
    A recipe authored by one user.

    ingredients and instructions are ordered string lists stored as JSON; they
    are never NULL (empty list instead). Reviews and likes go with the recipe.
    """

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=False)
    ingredients = Column(JSONList, nullable=False, default=list)
    instructions = Column(JSONList, nullable=False, default=list)
    cook_time = Column(Integer, nullable=False)
    servings = Column(Integer, nullable=False)
    difficulty = Column(Enum(Difficulty, name="recipe_difficulty"), nullable=True)
    category = Column(Enum(Category, name="recipe_category"), nullable=True, index=True)
    image = Column(String(2048), nullable=True)
    author_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    author = relationship("User", back_populates="recipes", lazy="joined")
    reviews = relationship(
        "Review",
        back_populates="recipe",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Review.id",
    )
    likes = relationship(
        "Like",
        back_populates="recipe",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def average_rating(self) -> float:
        if not self.reviews:
            return 0.0
        return sum(r.rating for r in self.reviews) / len(self.reviews)

    @property
    def review_count(self) -> int:
        return len(self.reviews or [])

    @property
    def like_count(self) -> int:
        return len(self.likes or [])

    def __repr__(self) -> str:
        return f"<Recipe id={self.id} title={self.title!r} author_id={self.author_id}>"
