"""Core configuration, database session and logging setup."""

from coinhub.core.config import get_settings, settings
from coinhub.core.database import SessionLocal, get_db
from coinhub.core.logging import configure_logging

__all__ = ["SessionLocal", "configure_logging", "get_db", "get_settings", "settings"]
