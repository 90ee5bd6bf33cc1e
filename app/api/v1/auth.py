"""Signup, login and current-user endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.v1.deps import DbSession, Tokens, get_current_user
from app.schemas.auth import AuthResponse, CurrentUser, LoginRequest, SignupRequest
from app.services import auth as auth_service
from app.services.credentials import get_user

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(body: SignupRequest, db: DbSession, tokens: Tokens) -> AuthResponse:
    """
    Register a new user and return a JWT for it.
    Duplicate username or email returns 409.
    """
    return auth_service.signup(db, body, tokens)


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: DbSession, tokens: Tokens) -> AuthResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    return auth_service.login(db, body, tokens)


@router.get("/me", response_model=AuthResponse)
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: DbSession,
) -> AuthResponse:
    """Profile of the token's owner. The token itself is not echoed back."""
    user = get_user(db, current_user.id)
    return auth_service.build_auth_response(user, token=None)
