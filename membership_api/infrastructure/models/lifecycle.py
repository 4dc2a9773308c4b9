"""Columns shared by every lifecycle-tracked table."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer
from sqlalchemy.sql import expression

from membership_api.utils import ensure_app_naive_datetime, now_in_app_timezone


def app_naive_now() -> datetime | None:
    return ensure_app_naive_datetime(now_in_app_timezone())


class TimestampColumns:
    """Creation/update attribution and timestamps."""

    created_by = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=app_naive_now)
    last_updated_by = Column(Integer, nullable=True)
    updated_at = Column(DateTime, nullable=True, onupdate=app_naive_now)


class LifecycleColumns(TimestampColumns):
    """Soft enable/disable state and who last disabled the record."""

    disabled = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    disabled_at = Column(DateTime, nullable=True)
    last_disabled_by = Column(Integer, nullable=True)


__all__ = ["LifecycleColumns", "TimestampColumns", "app_naive_now"]
