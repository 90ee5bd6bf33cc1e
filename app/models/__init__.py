"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.like import Like
from app.models.recipe import Category, Difficulty, Recipe
from app.models.review import Review
from app.models.user import User

__all__ = ["Base", "Category", "Difficulty", "Like", "Recipe", "Review", "User"]
