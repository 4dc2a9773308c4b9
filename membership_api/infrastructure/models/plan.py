"""SQLAlchemy model for membership plans."""

from sqlalchemy import Boolean, Column, Integer, Numeric, String, Text
from sqlalchemy.sql import expression

from membership_api.infrastructure.database import Base

from .lifecycle import LifecycleColumns


class PlanModel(LifecycleColumns, Base):
    """Database representation of a membership plan."""

    __tablename__ = "members_plans"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    value = Column(Numeric(10, 2), nullable=False)
    renew_value = Column(Numeric(10, 2), nullable=False)
    gun_target_discount = Column(Numeric(5, 2), nullable=False, default=0)
    course_discount = Column(Numeric(5, 2), nullable=False, default=0)
    shooting_drills_per_year = Column(Integer, nullable=False, default=0)
    gun_exemption = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    target_exemption = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


__all__ = ["PlanModel"]
