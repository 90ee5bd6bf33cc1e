"""Review persistence for a recipe."""

import logging

from sqlalchemy.orm import Session

from app.core.database import is_row_id
from app.core.exceptions import NotFoundError
from app.models import Review
from app.schemas.review import ReviewCreateRequest
from app.services.recipes import get_recipe

logger = logging.getLogger(__name__)


def list_reviews(session: Session, recipe_id: int) -> list[Review]:
    """Reviews of one recipe, oldest first. Raises NotFoundError when the recipe is absent."""
    get_recipe(session, recipe_id)
    return (
        session.query(Review)
        .filter(Review.recipe_id == recipe_id)
        .order_by(Review.id)
        .all()
    )


def find_review(session: Session, recipe_id: int, review_id: int) -> Review | None:
    """A review only counts as found under the recipe it belongs to."""
    if not (is_row_id(recipe_id) and is_row_id(review_id)):
        return None
    return (
        session.query(Review)
        .filter(Review.id == review_id, Review.recipe_id == recipe_id)
        .first()
    )


def add_review(
    session: Session,
    recipe_id: int,
    user_id: int,
    body: ReviewCreateRequest,
) -> Review:
    get_recipe(session, recipe_id)
    review = Review(
        rating=body.rating,
        comment=body.comment,
        recipe_id=recipe_id,
        user_id=user_id,
    )
    session.add(review)
    session.commit()
    session.refresh(review)
    logger.info("Added review id=%s recipe_id=%s user_id=%s", review.id, recipe_id, user_id)
    return review


def delete_review(session: Session, review: Review) -> None:
    review_id = review.id
    session.delete(review)
    session.commit()
    logger.info("Deleted review id=%s", review_id)


def get_review(session: Session, recipe_id: int, review_id: int) -> Review:
    review = find_review(session, recipe_id, review_id)
    if review is None:
        raise NotFoundError("review", review_id)
    return review
