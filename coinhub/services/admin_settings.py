"""Global admin settings: stored broadcast message and maintenance flag (single-row upsert)."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coinhub.models.admin_settings import SETTINGS_ROW_ID, AdminSettings

logger = logging.getLogger(__name__)


def get_admin_settings(db: Session) -> AdminSettings | None:
    """Return the settings row, or None if nothing has been written yet."""
    return db.get(AdminSettings, SETTINGS_ROW_ID)


def _upsert_admin_settings(db: Session, **values: Any) -> AdminSettings:
    """Create the settings row on first write, then apply values and commit."""
    row = get_admin_settings(db)
    if row is None:
        row = AdminSettings(
            id=SETTINGS_ROW_ID,
            maintenance_mode=False,
            maintenance_message="",
            last_broadcast="",
        )
        db.add(row)
        try:
            db.flush()
        except IntegrityError:
            # A concurrent request inserted the row first; update that one instead.
            db.rollback()
            row = db.get(AdminSettings, SETTINGS_ROW_ID, populate_existing=True)
            if row is None:
                raise
    for field, value in values.items():
        setattr(row, field, value)
    db.commit()
    return row


def record_broadcast(db: Session, message: str) -> AdminSettings:
    """Overwrite the last broadcast message. Delivery to clients is not handled here."""
    row = _upsert_admin_settings(db, last_broadcast=message)
    logger.info("Broadcast stored: length=%s", len(message))
    return row


def set_maintenance(db: Session, message: str | None) -> bool:
    """
    Enable maintenance mode with message, or disable it when message is empty.
    Returns the resulting maintenance_mode.
    """
    enabled = bool(message)
    _upsert_admin_settings(
        db,
        maintenance_mode=enabled,
        maintenance_message=message if enabled else "",
    )
    logger.info("Maintenance mode %s", "enabled" if enabled else "disabled")
    return enabled


def get_maintenance_status(db: Session) -> tuple[bool, str]:
    """Current (maintenance_mode, maintenance_message); (False, '') before the first write."""
    row = get_admin_settings(db)
    if row is None:
        return (False, "")
    return (bool(row.maintenance_mode), row.maintenance_message or "")
