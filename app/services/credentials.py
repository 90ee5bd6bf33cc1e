"""Credential store: user lookup and creation with uniqueness on username and email."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import is_row_id
from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import hash_password
from app.models import User

logger = logging.getLogger(__name__)


def find_by_username(session: Session, username: str) -> User | None:
    return session.query(User).filter(User.username == username).first()


def find_by_email(session: Session, email: str) -> User | None:
    return session.query(User).filter(User.email == email).first()


def find_by_id(session: Session, user_id: int) -> User | None:
    if not is_row_id(user_id):
        return None
    return session.get(User, user_id)


def get_user(session: Session, user_id: int) -> User:
    """Return the user or raise NotFoundError."""
    user = find_by_id(session, user_id)
    if user is None:
        raise NotFoundError("user", user_id)
    return user


def list_users(session: Session) -> list[User]:
    return session.query(User).order_by(User.id).all()


def create_user(
    session: Session,
    username: str,
    email: str,
    password: str,
    full_name: str | None = None,
) -> User:
    """
    Hash the password and persist a new user.

    Raises ConflictError when the username or email is taken, including when a
    concurrent signup wins the race and the unique constraint fires.
    """
    email = email.strip().lower()
    if find_by_username(session, username) is not None:
        raise ConflictError("Username already exists", context={"field": "username"})
    if find_by_email(session, email) is not None:
        raise ConflictError("Email already exists", context={"field": "email"})

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        full_name=full_name,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.info("Signup lost uniqueness race for username=%s", username)
        raise ConflictError("Username or email already exists") from e
    session.refresh(user)
    logger.info("Created user id=%s username=%s", user.id, user.username)
    return user


def update_profile(
    session: Session,
    user: User,
    full_name: str | None = None,
    bio: str | None = None,
    profile_image: str | None = None,
) -> User:
    """Apply non-null profile fields; username, email and password are not editable here."""
    if full_name is not None:
        user.full_name = full_name
    if bio is not None:
        user.bio = bio
    if profile_image is not None:
        user.profile_image = profile_image
    session.commit()
    session.refresh(user)
    return user
