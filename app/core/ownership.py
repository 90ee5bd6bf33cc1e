"""Ownership check for mutations on user-owned resources."""

import logging

from app.core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def is_owner(user_id: int, owner_id: int | None) -> bool:
    """True when the acting user is the resource's owner. Ownerless resources belong to nobody."""
    return owner_id is not None and owner_id == user_id


def ensure_owner(
    user_id: int,
    owner_id: int | None,
    resource: str = "resource",
    resource_id: int | None = None,
) -> None:
    """
    Raise AuthorizationError unless user_id owns the resource.

    Callers must have authenticated the user and located the resource first,
    so a failure here always means "exists but not yours" (403), never 401/404.
    """
    if is_owner(user_id, owner_id):
        return
    logger.warning(
        "Forbidden: user_id=%s attempted to modify %s id=%s owned by user_id=%s",
        user_id,
        resource,
        resource_id,
        owner_id,
    )
    raise AuthorizationError(
        f"You can only modify your own {resource}s",
        context={"resource": resource, "resource_id": resource_id},
    )
