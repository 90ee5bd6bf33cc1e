"""Reviews nested under a recipe."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.deps import DbSession, Owned, get_current_user, owned_review
from app.schemas.auth import CurrentUser
from app.schemas.review import ReviewCreateRequest, ReviewResponse
from app.services import reviews as review_service

router = APIRouter()


@router.get("/{recipe_id}/reviews", response_model=list[ReviewResponse])
def list_reviews(recipe_id: int, db: DbSession) -> list[ReviewResponse]:
    return [ReviewResponse.model_validate(r) for r in review_service.list_reviews(db, recipe_id)]


@router.post(
    "/{recipe_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_review(
    recipe_id: int,
    body: ReviewCreateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: DbSession,
) -> ReviewResponse:
    """Rate a recipe 1-5 stars with a comment."""
    review = review_service.add_review(db, recipe_id, current_user.id, body)
    return ReviewResponse.model_validate(review)


@router.delete("/{recipe_id}/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    recipe_id: int,
    review_id: int,
    owned: Annotated[Owned, Depends(owned_review)],
    db: DbSession,
) -> Response:
    """Delete one of your own reviews."""
    review_service.delete_review(db, owned.resource)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
