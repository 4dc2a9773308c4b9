"""Schemas for audit log endpoints."""

from datetime import datetime

from .base import ReadModel


class AuditLogRead(ReadModel):
    """Representation of an audit log entry returned by the API."""

    id: int
    table_name: str
    action: str
    description: str
    reference_id: int
    user_id: int | None
    created_at: datetime | None


__all__ = ["AuditLogRead"]
