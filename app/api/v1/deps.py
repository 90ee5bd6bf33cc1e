"""
Auth dependencies: bearer-token authentication and the ownership pipeline.

Every mutating endpoint on an owned resource depends on an OwnedResource
instance, which runs the same fixed sequence:

    authenticate (401) -> parse path ids (400) -> locate resource (404) -> check owner (403)

and only then hands the resource to the endpoint.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from app.core.ownership import ensure_owner
from app.core.security import TokenService, get_token_service
from app.schemas.auth import CurrentUser
from app.services.credentials import find_by_id
from app.services.recipes import find_recipe
from app.services.reviews import find_review

security = HTTPBearer(auto_error=False)

Credentials = Annotated[HTTPAuthorizationCredentials | None, Depends(security)]
DbSession = Annotated[Session, Depends(get_db)]
Tokens = Annotated[TokenService, Depends(get_token_service)]


def authenticate(token: str, db: Session, tokens: TokenService) -> CurrentUser:
    """
    Resolve a raw bearer token to the user it was issued for.

    The signature and expiry are checked first; the embedded username must then
    match the stored user with the embedded id.
    """
    claims = tokens.decode(token)
    user = find_by_id(db, claims.user_id)
    if user is None:
        raise AuthenticationError("User not found")
    if not tokens.verify(token, user.username):
        raise AuthenticationError("Invalid token")
    return CurrentUser(id=user.id, username=user.username, email=user.email)


def get_current_user(
    credentials: Credentials,
    db: DbSession,
    tokens: Tokens,
) -> CurrentUser:
    """Dependency: require a valid Bearer token and return the current user. Raises 401 otherwise."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")
    return authenticate(credentials.credentials, db, tokens)


def get_optional_user(
    request: Request,
    credentials: Credentials,
    db: DbSession,
    tokens: Tokens,
) -> CurrentUser | None:
    """
    Dependency: None for anonymous callers; a token that is sent must still be valid.

    Anonymous means no Authorization header at all. A header that is not a
    well-formed Bearer token is rejected like a bad token.
    """
    if credentials is None or not credentials.credentials:
        if request.headers.get("Authorization") is not None:
            raise AuthenticationError("Authorization header must be: Bearer <token>")
        return None
    return authenticate(credentials.credentials, db, tokens)


def _path_int(request: Request, name: str) -> int | None:
    raw = request.path_params.get(name)
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


@dataclass
class Owned:
    """A located resource together with the caller that owns it."""

    user: CurrentUser
    resource: Any


class OwnedResource:
    """
    Dependency factory for mutations on user-owned resources.

    locate receives the DB session and the integer path parameters named in
    path_params; owner_of returns the owning user's id.
    """

    def __init__(
        self,
        resource: str,
        path_params: tuple[str, ...],
        locate: Callable[..., Any],
        owner_of: Callable[[Any], int | None],
    ) -> None:
        self.resource = resource
        self.path_params = path_params
        self.locate = locate
        self.owner_of = owner_of

    def __call__(
        self,
        request: Request,
        credentials: Credentials,
        db: DbSession,
        tokens: Tokens,
    ) -> Owned:
        # 1. authenticate
        user = get_current_user(credentials, db, tokens)

        # 2. locate
        ids = []
        for name in self.path_params:
            value = _path_int(request, name)
            if value is None:
                raise ValidationError(f"{name} must be an integer", field=name)
            ids.append(value)
        target_id = ids[-1]
        target = self.locate(db, *ids)
        if target is None:
            raise NotFoundError(self.resource, target_id)

        # 3. authorize
        ensure_owner(user.id, self.owner_of(target), self.resource, target_id)
        return Owned(user=user, resource=target)


owned_recipe = OwnedResource(
    "recipe",
    ("recipe_id",),
    locate=find_recipe,
    owner_of=lambda recipe: recipe.author_id,
)

owned_review = OwnedResource(
    "review",
    ("recipe_id", "review_id"),
    locate=find_review,
    owner_of=lambda review: review.user_id,
)

owned_profile = OwnedResource(
    "user",
    ("user_id",),
    locate=find_by_id,
    owner_of=lambda user: user.id,
)
