"""Public maintenance status read by clients."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coinhub.core.database import get_db
from coinhub.schemas.admin import MaintenanceStatus
from coinhub.services.admin_settings import get_maintenance_status

router = APIRouter()


@router.get("", response_model=MaintenanceStatus)
def get_maintenance(db: Annotated[Session, Depends(get_db)]) -> MaintenanceStatus:
    maintenance_mode, message = get_maintenance_status(db)
    return MaintenanceStatus(maintenance_mode=maintenance_mode, message=message)
