"""Recipe CRUD. Reads are public; writes need a token and, for existing recipes, ownership."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.deps import DbSession, Owned, get_current_user, owned_recipe
from app.core.config import get_settings
from app.models import Category, Difficulty
from app.schemas.auth import CurrentUser
from app.schemas.recipe import RecipeResponse, RecipeWrite
from app.services import recipes as recipe_service

router = APIRouter()


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    db: DbSession,
    category: Category | None = None,
    difficulty: Difficulty | None = None,
) -> list[RecipeResponse]:
    """All recipes, newest first. Optionally filtered by category and/or difficulty."""
    found = recipe_service.list_recipes(db, category=category, difficulty=difficulty)
    return [RecipeResponse.model_validate(r) for r in found]


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: int, db: DbSession) -> RecipeResponse:
    return RecipeResponse.model_validate(recipe_service.get_recipe(db, recipe_id))


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeWrite,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: DbSession,
) -> RecipeResponse:
    """Create a recipe authored by the caller."""
    recipe = recipe_service.create_recipe(
        db,
        author_id=current_user.id,
        body=body,
        default_image=get_settings().DEFAULT_RECIPE_IMAGE,
    )
    return RecipeResponse.model_validate(recipe)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    body: RecipeWrite,
    owned: Annotated[Owned, Depends(owned_recipe)],
    db: DbSession,
) -> RecipeResponse:
    """
    Replace a recipe you authored.
    Null difficulty, category or image keep their stored values.
    """
    recipe = recipe_service.update_recipe(db, owned.resource, body)
    return RecipeResponse.model_validate(recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    owned: Annotated[Owned, Depends(owned_recipe)],
    db: DbSession,
) -> Response:
    """Delete a recipe you authored, with its reviews and likes."""
    recipe_service.delete_recipe(db, owned.resource)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
