"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from coinhub.core.config import settings

# Min/max lengths for credential validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

# Claims every access token must carry besides exp/iat.
REQUIRED_CLAIMS = ("sub", "username", "role")


class InvalidTokenError(Exception):
    """Raised for any token that cannot be trusted: missing, malformed, expired or mis-signed."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity decoded from a verified access token."""

    user_id: str
    username: str
    role: str


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: str, username: str, role: str) -> str:
    """Create a JWT access token carrying user id (sub), username, role, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": user_id,
        "username": username,
        "role": role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str | None) -> TokenIdentity:
    """
    Decode and validate a JWT and return the identity it carries.
    Raises InvalidTokenError on any failure; the cause is not exposed to callers.
    """
    if not token:
        raise InvalidTokenError()
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", *REQUIRED_CLAIMS]},
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e
    values = [payload.get(claim) for claim in REQUIRED_CLAIMS]
    if not all(isinstance(v, str) and v for v in values):
        raise InvalidTokenError()
    user_id, username, role = values
    return TokenIdentity(user_id=user_id, username=username, role=role)
