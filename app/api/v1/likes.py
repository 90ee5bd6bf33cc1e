"""Like, unlike and like-status for a recipe."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.deps import DbSession, get_current_user, get_optional_user
from app.schemas.auth import CurrentUser
from app.schemas.like import LikeStatusResponse, MessageResponse
from app.services import likes as like_service

router = APIRouter()


@router.post("/{recipe_id}/like", response_model=MessageResponse)
def like_recipe(
    recipe_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: DbSession,
) -> MessageResponse:
    like_service.like_recipe(db, current_user.id, recipe_id)
    return MessageResponse(message="Recipe liked")


@router.delete("/{recipe_id}/like", response_model=MessageResponse)
def unlike_recipe(
    recipe_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: DbSession,
) -> MessageResponse:
    like_service.unlike_recipe(db, current_user.id, recipe_id)
    return MessageResponse(message="Recipe unliked")


@router.get("/{recipe_id}/like", response_model=LikeStatusResponse)
def like_status(
    recipe_id: int,
    current_user: Annotated[CurrentUser | None, Depends(get_optional_user)],
    db: DbSession,
) -> LikeStatusResponse:
    """Whether the caller likes the recipe; always false for anonymous callers."""
    if current_user is None:
        return LikeStatusResponse(liked=False)
    return LikeStatusResponse(
        liked=like_service.exists_by_user_and_recipe(db, current_user.id, recipe_id)
    )
