"""Pydantic request/response schemas."""

from coinhub.schemas.admin import (
    AdminUserUpdate,
    AdminUserView,
    BroadcastRequest,
    MaintenanceRequest,
    MaintenanceStatus,
    MaintenanceToggleResponse,
)
from coinhub.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserSummary,
)
from coinhub.schemas.common import CamelModel, MessageResponse
from coinhub.schemas.health import HealthResponse
from coinhub.schemas.users import DeductCoinsRequest, DeductCoinsResponse

__all__ = [
    "AdminUserUpdate",
    "AdminUserView",
    "BroadcastRequest",
    "CamelModel",
    "DeductCoinsRequest",
    "DeductCoinsResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MaintenanceRequest",
    "MaintenanceStatus",
    "MaintenanceToggleResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserSummary",
]
