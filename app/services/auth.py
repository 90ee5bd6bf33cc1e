"""Signup and login: credential checks and token issuance."""

import logging

from sqlalchemy.orm import Session

from app.core.exceptions import AuthenticationError
from app.core.security import TokenService, verify_password
from app.models import User
from app.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from app.services import credentials

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def build_auth_response(user: User, token: str | None) -> AuthResponse:
    return AuthResponse(
        token=token,
        user_id=user.id,
        username=user.username,
        email=user.email,
        full_name=user.full_name,
    )


def signup(session: Session, body: SignupRequest, tokens: TokenService) -> AuthResponse:
    """Create the account and return a token for it. Raises ConflictError on duplicates."""
    user = credentials.create_user(
        session,
        username=body.username,
        email=str(body.email),
        password=body.password,
        full_name=body.full_name,
    )
    return build_auth_response(user, tokens.issue(user.username, user.id))


def login(session: Session, body: LoginRequest, tokens: TokenService) -> AuthResponse:
    """
    Check credentials and return a fresh token.

    Unknown user and wrong password fail identically so usernames cannot be probed.
    """
    user = credentials.find_by_username(session, body.username)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Failed login for username=%s", body.username)
        raise AuthenticationError(INVALID_CREDENTIALS)
    return build_auth_response(user, tokens.issue(user.username, user.id))
