"""Attribution fields shared by lifecycle-tracked responses."""

from datetime import datetime

from .base import ReadModel


class LifecycleRead(ReadModel):
    created_by: int | None
    created_at: datetime | None
    last_updated_by: int | None
    updated_at: datetime | None
    disabled: bool
    disabled_at: datetime | None
    last_disabled_by: int | None


__all__ = ["LifecycleRead"]
