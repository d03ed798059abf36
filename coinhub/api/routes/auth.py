"""Registration, login and token verification."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from coinhub.api.deps import require_token
from coinhub.core.config import get_settings
from coinhub.core.database import get_db
from coinhub.core.security import TokenIdentity, create_access_token
from coinhub.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, UserSummary
from coinhub.schemas.common import MessageResponse
from coinhub.services.accounts import (
    DuplicateUserError,
    InactiveAccountError,
    InvalidCredentialsError,
    UserNotFoundError,
    authenticate,
    get_user,
    register_user,
)

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Create an account with the default coin balance. Does not log the user in."""
    try:
        register_user(db, body.username, body.email, body.password, get_settings())
    except DuplicateUserError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT and the user's summary.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        user = authenticate(db, body.username, body.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    except InactiveAccountError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message) from e

    token = create_access_token(user.user_id, user.username, user.role)
    return LoginResponse(token=token, user=UserSummary.model_validate(user))


@router.get("/verify", response_model=UserSummary)
def verify(
    identity: Annotated[TokenIdentity, Depends(require_token)],
    db: Annotated[Session, Depends(get_db)],
) -> UserSummary:
    """Return the current state of the token's user (coins and role are read live)."""
    try:
        user = get_user(db, identity.user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return UserSummary.model_validate(user)
