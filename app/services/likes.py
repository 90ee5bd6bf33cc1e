"""Likes: at most one per user per recipe, enforced by a unique constraint."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_row_id
from app.core.exceptions import ConflictError, ValidationError
from app.models import Like
from app.services.recipes import get_recipe

logger = logging.getLogger(__name__)


def find_like(session: Session, user_id: int, recipe_id: int) -> Like | None:
    if not is_row_id(recipe_id):
        return None
    return (
        session.query(Like)
        .filter(Like.user_id == user_id, Like.recipe_id == recipe_id)
        .first()
    )


def exists_by_user_and_recipe(session: Session, user_id: int, recipe_id: int) -> bool:
    return find_like(session, user_id, recipe_id) is not None


def like_recipe(session: Session, user_id: int, recipe_id: int) -> Like:
    """Record a like. Raises NotFoundError for a missing recipe, ConflictError when already liked."""
    get_recipe(session, recipe_id)
    if exists_by_user_and_recipe(session, user_id, recipe_id):
        raise ConflictError("Recipe already liked", context={"recipe_id": recipe_id})
    like = Like(user_id=user_id, recipe_id=recipe_id)
    session.add(like)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError("Recipe already liked", context={"recipe_id": recipe_id}) from e
    logger.info("user_id=%s liked recipe_id=%s", user_id, recipe_id)
    return like


def unlike_recipe(session: Session, user_id: int, recipe_id: int) -> None:
    """Remove the caller's like. Raises ValidationError when there is nothing to remove."""
    get_recipe(session, recipe_id)
    like = find_like(session, user_id, recipe_id)
    if like is None:
        raise ValidationError("Recipe not liked", context={"recipe_id": recipe_id})
    session.delete(like)
    session.commit()
    logger.info("user_id=%s unliked recipe_id=%s", user_id, recipe_id)
