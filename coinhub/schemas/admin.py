"""Request/response schemas for admin panel endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from coinhub.schemas.auth import UserSummary
from coinhub.schemas.common import CamelModel
from coinhub.schemas.users import MAX_COIN_AMOUNT


class AdminUserView(UserSummary):
    """User entry for the admin table (no password)."""

    created_at: datetime | None = None


class AdminUserUpdate(BaseModel):
    """
    Fields an admin may change on a user. Anything else is rejected,
    so identity fields and the password hash cannot be written through this route.
    """

    model_config = ConfigDict(extra="forbid")

    coins: int | None = Field(default=None, strict=True, ge=0, le=MAX_COIN_AMOUNT)
    status: Literal["active", "suspended", "banned"] | None = None
    role: Literal["user", "admin"] | None = None


class BroadcastRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=10000, description="Message shown to all users")


class MaintenanceRequest(BaseModel):
    """An empty or missing message turns maintenance mode off."""

    message: str | None = Field(default="", max_length=1024)


class MaintenanceToggleResponse(CamelModel):
    message: str
    maintenance_mode: bool


class MaintenanceStatus(CamelModel):
    """Public maintenance flag as read by clients."""

    maintenance_mode: bool = False
    message: str = ""
