"""ORM model for the global admin settings row (maintenance flag, last broadcast)."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from coinhub.models.base import Base

# The table holds at most one row, always under this primary key.
SETTINGS_ROW_ID = 1


class AdminSettings(Base):
    """Process-wide settings edited from the admin panel. Created lazily on first write."""

    __tablename__ = "admin_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    maintenance_mode = Column(Boolean, nullable=False, default=False)
    maintenance_message = Column(String(1024), nullable=False, default="")
    last_broadcast = Column(Text, nullable=False, default="")
