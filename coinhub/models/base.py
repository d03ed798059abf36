"""SQLAlchemy declarative Base shared by the users and admin_settings tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
