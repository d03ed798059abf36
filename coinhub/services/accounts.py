"""Account service: registration, credential checks, lookups and admin edits on users."""

import logging
import uuid
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coinhub.core.security import hash_password, verify_password
from coinhub.models.user import ROLES, STATUSES, User

if TYPE_CHECKING:
    from coinhub.core.config import Settings

logger = logging.getLogger(__name__)

# Plaintext only ever hashed to give unknown-username logins the same bcrypt cost.
_DUMMY_PASSWORD = "coinhub-unknown-user"

# Fields an admin update may touch; mirrors AdminUserUpdate.
ADMIN_UPDATABLE_FIELDS = frozenset({"coins", "status", "role"})


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    return hash_password(_DUMMY_PASSWORD)


class AccountError(Exception):
    """Base class for account errors; message is safe to show to the client."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateUserError(AccountError):
    """Raised when the username or email is already taken. Does not say which."""

    def __init__(self) -> None:
        super().__init__("Username or email already exists")


class InvalidCredentialsError(AccountError):
    """Raised for an unknown username and for a wrong password alike."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class InactiveAccountError(AccountError):
    """Raised when a suspended or banned user tries to log in."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"Account is {status}")


class UserNotFoundError(AccountError):
    def __init__(self) -> None:
        super().__init__("User not found")


def generate_user_id() -> str:
    """Opaque public identifier for a user (32 hex chars)."""
    return uuid.uuid4().hex


def create_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    *,
    coins: int,
    role: str = "user",
) -> User:
    """
    Persist a new user with a hashed password.

    Raises DuplicateUserError if the username or email is taken, including when a
    concurrent insert wins the race and the unique constraint fires.
    """
    existing = (
        db.query(User.id)
        .filter(or_(User.username == username, User.email == email))
        .first()
    )
    if existing is not None:
        raise DuplicateUserError()

    user = User(
        user_id=generate_user_id(),
        username=username,
        email=email,
        password_hash=hash_password(password),
        coins=coins,
        role=role,
        status="active",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUserError() from e
    db.refresh(user)
    return user


def register_user(
    db: Session, username: str, email: str, password: str, settings: "Settings"
) -> User:
    """Create a regular user with the configured starting balance. No token is issued."""
    user = create_user(db, username, email, password, coins=settings.DEFAULT_COINS)
    logger.info("Registered user: user_id=%s username=%s", user.user_id, user.username)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Check credentials and account status for login.

    Unknown username and wrong password raise the same InvalidCredentialsError.
    A non-active account raises InactiveAccountError whether or not the password matched.
    """
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        verify_password(password, _dummy_password_hash())
        logger.info("Login failed: unknown username")
        raise InvalidCredentialsError()
    password_ok = verify_password(password, user.password_hash)
    if user.status != "active":
        logger.info("Login refused: user_id=%s status=%s", user.user_id, user.status)
        raise InactiveAccountError(user.status)
    if not password_ok:
        logger.info("Login failed: wrong password for user_id=%s", user.user_id)
        raise InvalidCredentialsError()
    return user


def get_user(db: Session, user_id: str) -> User:
    """Return the live user record for user_id. Raises UserNotFoundError."""
    user = db.query(User).filter(User.user_id == user_id).first()
    if user is None:
        raise UserNotFoundError()
    return user


def list_users(db: Session) -> list[User]:
    """All users in storage order."""
    return db.query(User).order_by(User.id).all()


def update_user(db: Session, user_id: str, updates: dict[str, Any]) -> User:
    """
    Apply an admin edit limited to coins, status and role.
    Raises UserNotFoundError; ValueError for fields outside the allow-list.
    """
    unknown = set(updates) - ADMIN_UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields not updatable: {', '.join(sorted(unknown))}")
    if "coins" in updates and updates["coins"] < 0:
        raise ValueError("coins must not be negative")
    if "status" in updates and updates["status"] not in STATUSES:
        raise ValueError(f"status must be one of {', '.join(STATUSES)}")
    if "role" in updates and updates["role"] not in ROLES:
        raise ValueError(f"role must be one of {', '.join(ROLES)}")

    user = get_user(db, user_id)
    for field, value in updates.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    if updates:
        logger.info(
            "Admin updated user: user_id=%s fields=%s",
            user_id,
            ",".join(sorted(updates)),
        )
    return user


def ensure_admin_user(db: Session, settings: "Settings") -> User | None:
    """
    Create the configured admin account if it does not exist yet.

    Returns the created user, or None when no admin is configured or it already exists.
    Idempotent: safe to run on every startup.
    """
    if not settings.ADMIN_USERNAME or settings.ADMIN_PASSWORD is None:
        logger.info("No ADMIN_USERNAME configured; skipping admin seeding.")
        return None
    existing = db.query(User).filter(User.username == settings.ADMIN_USERNAME).first()
    if existing is not None:
        return None
    try:
        user = create_user(
            db,
            settings.ADMIN_USERNAME,
            settings.ADMIN_EMAIL or "",
            settings.ADMIN_PASSWORD.get_secret_value(),
            coins=settings.ADMIN_COINS,
            role="admin",
        )
    except DuplicateUserError:
        # Another worker seeded it first, or the email belongs to someone else.
        logger.warning(
            "Admin seeding skipped: username or email already in use (username=%s)",
            settings.ADMIN_USERNAME,
        )
        return None
    logger.info("Admin user created: username=%s", user.username)
    return user
