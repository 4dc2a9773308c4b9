"""Plan schemas."""

from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field

from .base import PartialUpdate
from .lifecycle import LifecycleRead


class PlanCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str | None = None
    value: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    renew_value: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    gun_target_discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    course_discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    shooting_drills_per_year: int = Field(default=0, ge=0)
    gun_exemption: bool = False
    target_exemption: bool = False
    disabled: bool = False


class PlanUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "value",
            "renew_value",
            "gun_target_discount",
            "course_discount",
            "shooting_drills_per_year",
            "gun_exemption",
            "target_exemption",
            "disabled",
        }
    )

    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None
    value: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    renew_value: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    gun_target_discount: Decimal | None = Field(default=None, ge=0, le=100)
    course_discount: Decimal | None = Field(default=None, ge=0, le=100)
    shooting_drills_per_year: int | None = Field(default=None, ge=0)
    gun_exemption: bool | None = None
    target_exemption: bool | None = None
    disabled: bool | None = None


class PlanRead(LifecycleRead):
    id: int
    name: str
    description: str | None
    value: Decimal
    renew_value: Decimal
    gun_target_discount: Decimal
    course_discount: Decimal
    shooting_drills_per_year: int
    gun_exemption: bool
    target_exemption: bool


__all__ = ["PlanCreate", "PlanRead", "PlanUpdate"]
