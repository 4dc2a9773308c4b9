"""SQLAlchemy model for the permission catalog."""

from sqlalchemy import Column, String

from membership_api.infrastructure.database import Base


class PermissionModel(Base):
    """Database representation of a grantable permission."""

    __tablename__ = "permissions"

    id = Column(String(60), primary_key=True)
    description = Column(String(255), nullable=False)


__all__ = ["PermissionModel"]
