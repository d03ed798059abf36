"""Admin panel endpoints: user management, broadcast and maintenance toggle (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from coinhub.api.deps import require_admin
from coinhub.core.database import get_db
from coinhub.schemas.admin import (
    AdminUserUpdate,
    AdminUserView,
    BroadcastRequest,
    MaintenanceRequest,
    MaintenanceToggleResponse,
)
from coinhub.schemas.common import MessageResponse
from coinhub.services.accounts import UserNotFoundError, list_users, update_user
from coinhub.services.admin_settings import record_broadcast, set_maintenance

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/users", response_model=list[AdminUserView])
def get_users(
    db: Annotated[Session, Depends(get_db)],
) -> list[AdminUserView]:
    """List all users in storage order, without password hashes."""
    return [AdminUserView.model_validate(u) for u in list_users(db)]


@router.patch("/users/{user_id}", response_model=AdminUserView)
def patch_user(
    user_id: str,
    body: AdminUserUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> AdminUserView:
    """
    Change a user's coins, status and/or role. Other fields are rejected with 400.
    Status changes do not revoke tokens the user already holds.
    """
    try:
        user = update_user(db, user_id, body.model_dump(exclude_none=True))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return AdminUserView.model_validate(user)


@router.post("/broadcast", response_model=MessageResponse)
def post_broadcast(
    body: BroadcastRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Store the message as the latest broadcast. Clients are not notified."""
    record_broadcast(db, body.message)
    return MessageResponse(message="Broadcast sent successfully")


@router.post("/maintenance", response_model=MaintenanceToggleResponse)
def post_maintenance(
    db: Annotated[Session, Depends(get_db)],
    body: Annotated[MaintenanceRequest | None, Body()] = None,
) -> MaintenanceToggleResponse:
    """Enable maintenance mode with the given message; an empty or missing message disables it."""
    enabled = set_maintenance(db, body.message if body is not None else "")
    return MaintenanceToggleResponse(
        message=f"Maintenance mode {'enabled' if enabled else 'disabled'}",
        maintenance_mode=enabled,
    )
