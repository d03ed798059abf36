"""ORM model for application users (credentials, coin balance, role and status)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from coinhub.models.base import Base

ROLES = ("user", "admin")
STATUSES = ("active", "suspended", "banned")


class User(Base):
    """
    User account for JWT authentication, role-based access control and the coin ledger.

    role: 'admin' or 'user'
    status: 'active', 'suspended' or 'banned'; only active users may log in.
    coins is kept non-negative by the ledger and admin update paths.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(32), nullable=False, unique=True, index=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    coins = Column(Integer, nullable=False, default=100)
    role = Column(String(32), nullable=False, default="user")
    status = Column(String(32), nullable=False, default="active")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
