"""Health check endpoint for load balancers and monitoring."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coinhub.core.config import get_settings
from coinhub.core.database import check_db_connected, get_db
from coinhub.schemas.health import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Always 200 while the process is up; database reports whether storage answers."""
    connected = check_db_connected(db)
    if not connected:
        logger.warning("Health check: database unreachable")
    return HealthResponse(
        environment=get_settings().APP_ENV,
        database="connected" if connected else "disconnected",
    )
