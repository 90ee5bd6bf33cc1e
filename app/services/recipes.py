"""Recipe persistence: listing, lookup, create, update and delete."""

import logging

from sqlalchemy.orm import Session

from app.core.database import is_row_id
from app.core.exceptions import NotFoundError
from app.models import Category, Difficulty, Recipe
from app.schemas.recipe import RecipeWrite

logger = logging.getLogger(__name__)


def list_recipes(
    session: Session,
    category: Category | None = None,
    difficulty: Difficulty | None = None,
) -> list[Recipe]:
    query = session.query(Recipe)
    if category is not None:
        query = query.filter(Recipe.category == category)
    if difficulty is not None:
        query = query.filter(Recipe.difficulty == difficulty)
    return query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()


def find_recipe(session: Session, recipe_id: int) -> Recipe | None:
    if not is_row_id(recipe_id):
        return None
    return session.get(Recipe, recipe_id)


def get_recipe(session: Session, recipe_id: int) -> Recipe:
    """Return the recipe or raise NotFoundError."""
    recipe = find_recipe(session, recipe_id)
    if recipe is None:
        raise NotFoundError("recipe", recipe_id)
    return recipe


def create_recipe(
    session: Session,
    author_id: int,
    body: RecipeWrite,
    default_image: str,
) -> Recipe:
    """Persist a new recipe owned by author_id. A blank image gets the default photo."""
    recipe = Recipe(
        title=body.title,
        description=body.description,
        ingredients=list(body.ingredients or []),
        instructions=list(body.instructions or []),
        cook_time=body.cook_time,
        servings=body.servings,
        difficulty=body.difficulty,
        category=body.category,
        image=body.image or default_image,
        author_id=author_id,
    )
    session.add(recipe)
    session.commit()
    session.refresh(recipe)
    logger.info("Created recipe id=%s author_id=%s", recipe.id, author_id)
    return recipe


def update_recipe(session: Session, recipe: Recipe, body: RecipeWrite) -> Recipe:
    """
    Replace the recipe's editable fields.

    Null difficulty, category or image keep the stored value; null lists are
    stored as empty lists. The author never changes.
    """
    recipe.title = body.title
    recipe.description = body.description
    recipe.ingredients = list(body.ingredients or [])
    recipe.instructions = list(body.instructions or [])
    recipe.cook_time = body.cook_time
    recipe.servings = body.servings
    if body.difficulty is not None:
        recipe.difficulty = body.difficulty
    if body.category is not None:
        recipe.category = body.category
    if body.image:
        recipe.image = body.image
    session.commit()
    session.refresh(recipe)
    logger.info("Updated recipe id=%s", recipe.id)
    return recipe


def delete_recipe(session: Session, recipe: Recipe) -> None:
    """Delete the recipe together with its reviews and likes."""
    recipe_id = recipe.id
    session.delete(recipe)
    session.commit()
    logger.info("Deleted recipe id=%s", recipe_id)
