"""SQLAlchemy model for member addresses."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from membership_api.infrastructure.database import Base

from .lifecycle import TimestampColumns


class AddressModel(TimestampColumns, Base):
    """Database representation of an address owned by a member."""

    __tablename__ = "addresses"
    __table_args__ = (Index("ix_addresses_member_zipcode", "member_id", "zipcode"),)

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False)
    street = Column(String(150), nullable=False)
    number = Column(String(20), nullable=False)
    neighbourhood = Column(String(80), nullable=False)
    complement = Column(String(120), nullable=True)
    zipcode = Column(String(9), nullable=False)
    city_id = Column(Integer, nullable=False)
    member = relationship("MemberModel", back_populates="addresses")


__all__ = ["AddressModel"]
