"""Public user profiles and owner-only profile edits."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.deps import DbSession, Owned, owned_profile
from app.schemas.user import UserProfile, UserUpdateRequest
from app.services import credentials

router = APIRouter()


@router.get("", response_model=list[UserProfile])
def list_users(db: DbSession) -> list[UserProfile]:
    return [UserProfile.model_validate(u) for u in credentials.list_users(db)]


@router.get("/{user_id}", response_model=UserProfile)
def get_user(user_id: int, db: DbSession) -> UserProfile:
    return UserProfile.model_validate(credentials.get_user(db, user_id))


@router.put("/{user_id}", response_model=UserProfile)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    owned: Annotated[Owned, Depends(owned_profile)],
    db: DbSession,
) -> UserProfile:
    """Edit display fields of your own profile."""
    user = credentials.update_profile(
        db,
        owned.resource,
        full_name=body.full_name,
        bio=body.bio,
        profile_image=body.profile_image,
    )
    return UserProfile.model_validate(user)
