"""SQLAlchemy model for the audit ledger."""

from sqlalchemy import Column, DateTime, Index, Integer, String

from membership_api.infrastructure.database import Base

from .lifecycle import app_naive_now


class AuditLogModel(Base):
    """Database representation of audit events.

    Rows are only ever inserted.
    """

    __tablename__ = "audit_log"
    __table_args__ = (Index("ix_audit_log_reference", "table_name", "reference_id"),)

    id = Column(Integer, primary_key=True, index=True)
    table_name = Column(String(63), nullable=False)
    action = Column(String(10), nullable=False)
    description = Column(String(120), nullable=False)
    reference_id = Column(Integer, nullable=False)
    user_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=app_naive_now)


__all__ = ["AuditLogModel"]
