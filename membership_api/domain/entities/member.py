"""Domain entity representing a club member."""

from dataclasses import dataclass, field
from datetime import date, datetime

from .address import Address


@dataclass
class Member:
    """Personal, registration and plan data of a club member."""

    id: int | None
    name: str
    rg: str
    issuing_authority: str
    cpf: str
    naturality_city_id: int
    mother_name: str | None
    father_name: str | None
    profession: str
    email: str | None
    phone: str | None
    cell_phone: str
    cr_number: str
    issued_at: date
    birth_date: date
    cr_validity: date
    health_issues: str | None
    gender: str
    marital_status: str
    blood_typing: str
    plan_id: int
    created_by: int | None
    created_at: datetime | None
    last_updated_by: int | None
    updated_at: datetime | None
    disabled: bool
    disabled_at: datetime | None
    last_disabled_by: int | None
    addresses: list[Address] = field(default_factory=list)


__all__ = ["Member"]
