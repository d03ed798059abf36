"""SQLAlchemy ORM models."""

from coinhub.models.admin_settings import AdminSettings
from coinhub.models.base import Base
from coinhub.models.user import User

__all__ = ["AdminSettings", "Base", "User"]
