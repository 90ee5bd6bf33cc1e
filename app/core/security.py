"""Password hashing and JWT issuance/verification for authentication."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.exceptions import MalformedTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

USER_ID_CLAIM = "userId"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Each call uses a fresh salt."""
    if not plain_password:
        raise ValueError("password must be non-empty")
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    if not plain_password or not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity and lifetime asserted by a verified token."""

    username: str
    user_id: int
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """
    Stateless issue/verify pair for signed bearer tokens.

    The secret is fixed for the life of the instance. The clock is injectable
    so expiry can be tested without sleeping.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 1440,
        clock: Clock = utc_now,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        self._clock = clock

    def __repr__(self) -> str:
        return f"TokenService(algorithm={self.algorithm!r}, expire_minutes={self.expire_minutes})"

    def issue(self, username: str, user_id: int) -> str:
        """Mint a token binding username and user_id with iat and exp."""
        now = self._clock()
        expire = now + timedelta(minutes=self.expire_minutes)
        payload: dict[str, Any] = {
            "sub": username,
            USER_ID_CLAIM: int(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def _parse(self, token: str) -> dict[str, Any]:
        """Parse and check the signature. Expiry is checked separately against our clock."""
        if not token or not isinstance(token, str):
            raise MalformedTokenError("Token is missing")
        if token.count(".") != 2:
            raise MalformedTokenError("Token must have three segments")
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": ["sub", "exp", "iat"],
                },
            )
        except jwt.PyJWTError as e:
            raise MalformedTokenError("Invalid token", context={"reason": type(e).__name__}) from e

    def _is_expired(self, payload: dict[str, Any]) -> bool:
        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            raise MalformedTokenError("Invalid token payload")
        return exp <= self._clock().timestamp()

    def decode(self, token: str) -> TokenClaims:
        """
        Parse, check signature and expiry, and return the embedded claims.

        Raises MalformedTokenError or TokenExpiredError.
        """
        payload = self._parse(token)
        if self._is_expired(payload):
            raise TokenExpiredError()
        username = payload.get("sub")
        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(username, str) or not username:
            raise MalformedTokenError("Invalid token payload")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise MalformedTokenError("Invalid token payload")
        return TokenClaims(
            username=username,
            user_id=user_id,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )

    def verify(self, token: str, expected_username: str) -> bool:
        """
        Parse -> CheckSignature -> CheckExpiry -> CheckUsernameMatch.

        Malformed or badly signed tokens raise MalformedTokenError; an expired
        token or a username mismatch returns False.
        """
        payload = self._parse(token)
        if self._is_expired(payload):
            return False
        return payload.get("sub") == expected_username

    def extract_username(self, token: str) -> str:
        return self.decode(token).username

    def extract_user_id(self, token: str) -> int:
        return self.decode(token).user_id


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service built once from settings."""
    logger.debug(
        "Token service initialized (algorithm=%s, expire_minutes=%s)",
        settings.JWT_ALGORITHM,
        settings.JWT_EXPIRE_MINUTES,
    )
    return TokenService(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
