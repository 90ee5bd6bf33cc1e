"""Pydantic request/response schemas."""

from app.schemas.auth import AuthResponse, CurrentUser, LoginRequest, SignupRequest
from app.schemas.health import HealthResponse
from app.schemas.like import LikeStatusResponse, MessageResponse
from app.schemas.recipe import AuthorSummary, RecipeResponse, RecipeWrite
from app.schemas.review import ReviewCreateRequest, ReviewResponse
from app.schemas.user import UserProfile, UserUpdateRequest

__all__ = [
    "AuthResponse",
    "AuthorSummary",
    "CurrentUser",
    "HealthResponse",
    "LikeStatusResponse",
    "LoginRequest",
    "MessageResponse",
    "RecipeResponse",
    "RecipeWrite",
    "ReviewCreateRequest",
    "ReviewResponse",
    "SignupRequest",
    "UserProfile",
    "UserUpdateRequest",
]
