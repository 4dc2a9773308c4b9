"""SQLAlchemy model for club members."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from membership_api.infrastructure.database import Base

from .lifecycle import LifecycleColumns


class MemberModel(LifecycleColumns, Base):
    """Database representation of a club member."""

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    rg = Column(String(20), nullable=False)
    issuing_authority = Column(String(30), nullable=False)
    cpf = Column(String(14), nullable=False, index=True)
    naturality_city_id = Column(Integer, nullable=False)
    mother_name = Column(String(120), nullable=True)
    father_name = Column(String(120), nullable=True)
    profession = Column(String(80), nullable=False)
    email = Column(String(120), nullable=True, unique=True, index=True)
    phone = Column(String(20), nullable=True)
    cell_phone = Column(String(20), nullable=False)
    cr_number = Column(String(30), nullable=False)
    issued_at = Column(Date, nullable=False)
    birth_date = Column(Date, nullable=False)
    cr_validity = Column(Date, nullable=False)
    health_issues = Column(Text, nullable=True)
    gender = Column(String(10), nullable=False)
    marital_status = Column(String(20), nullable=False)
    blood_typing = Column(String(12), nullable=False)
    plan_id = Column(Integer, ForeignKey("members_plans.id"), nullable=False, index=True)
    plan = relationship("PlanModel", lazy="joined")
    addresses = relationship(
        "AddressModel",
        back_populates="member",
        order_by="AddressModel.id",
    )


__all__ = ["MemberModel"]
