"""Domain entity representing a membership plan."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Plan:
    """Subscription plan a member is enrolled in."""

    id: int | None
    name: str
    description: str | None
    value: Decimal
    renew_value: Decimal
    gun_target_discount: Decimal
    course_discount: Decimal
    shooting_drills_per_year: int
    gun_exemption: bool
    target_exemption: bool
    created_by: int | None
    created_at: datetime | None
    last_updated_by: int | None
    updated_at: datetime | None
    disabled: bool
    disabled_at: datetime | None
    last_disabled_by: int | None


__all__ = ["Plan"]
