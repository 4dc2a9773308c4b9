"""SQLAlchemy model for the user table."""

from sqlalchemy import JSON, Column, Integer, String

from membership_api.infrastructure.database import Base

from .lifecycle import LifecycleColumns


class UserModel(LifecycleColumns, Base):
    """Database representation of the system user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    permissions = Column(JSON, nullable=False, default=list)


__all__ = ["UserModel"]
