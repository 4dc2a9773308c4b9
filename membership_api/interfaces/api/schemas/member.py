"""Member and address schemas."""

from datetime import date, datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, EmailStr, Field

from .base import PartialUpdate, ReadModel
from .lifecycle import LifecycleRead

Gender = Literal["male", "female", "other"]
MaritalStatus = Literal["single", "married", "widower", "legally_separated", "divorced"]
BloodTyping = Literal[
    "APositive",
    "ANegative",
    "BPositive",
    "BNegative",
    "ABPositive",
    "ABNegative",
    "OPositive",
    "ONegative",
]


class AddressInput(BaseModel):
    street: str = Field(..., min_length=1, max_length=150)
    number: str = Field(..., min_length=1, max_length=20)
    neighbourhood: str = Field(..., min_length=1, max_length=80)
    complement: str | None = Field(default=None, max_length=120)
    zipcode: str = Field(..., min_length=1, max_length=9)
    city_id: int


class AddressRead(ReadModel):
    id: int
    member_id: int
    street: str
    number: str
    neighbourhood: str
    complement: str | None
    zipcode: str
    city_id: int
    created_by: int | None
    created_at: datetime | None
    last_updated_by: int | None
    updated_at: datetime | None


class MemberCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    rg: str = Field(..., min_length=1, max_length=20)
    issuing_authority: str = Field(..., min_length=1, max_length=30)
    cpf: str = Field(..., min_length=11, max_length=14)
    naturality_city_id: int
    mother_name: str | None = None
    father_name: str | None = None
    profession: str = Field(..., min_length=1, max_length=80)
    email: EmailStr | None = None
    phone: str | None = None
    cell_phone: str = Field(..., min_length=1, max_length=20)
    cr_number: str = Field(..., min_length=1, max_length=30)
    issued_at: date
    birth_date: date
    cr_validity: date
    health_issues: str | None = None
    gender: Gender
    marital_status: MaritalStatus
    blood_typing: BloodTyping
    plan_id: int
    disabled: bool = False
    addresses: list[AddressInput] = Field(default_factory=list)


class MemberUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "rg",
            "issuing_authority",
            "cpf",
            "naturality_city_id",
            "profession",
            "cell_phone",
            "cr_number",
            "issued_at",
            "birth_date",
            "cr_validity",
            "gender",
            "marital_status",
            "blood_typing",
            "plan_id",
            "disabled",
            "addresses",
        }
    )

    name: str | None = Field(default=None, min_length=1, max_length=120)
    rg: str | None = Field(default=None, min_length=1, max_length=20)
    issuing_authority: str | None = Field(default=None, min_length=1, max_length=30)
    cpf: str | None = Field(default=None, min_length=11, max_length=14)
    naturality_city_id: int | None = None
    mother_name: str | None = None
    father_name: str | None = None
    profession: str | None = Field(default=None, min_length=1, max_length=80)
    email: EmailStr | None = None
    phone: str | None = None
    cell_phone: str | None = Field(default=None, min_length=1, max_length=20)
    cr_number: str | None = Field(default=None, min_length=1, max_length=30)
    issued_at: date | None = None
    birth_date: date | None = None
    cr_validity: date | None = None
    health_issues: str | None = None
    gender: Gender | None = None
    marital_status: MaritalStatus | None = None
    blood_typing: BloodTyping | None = None
    plan_id: int | None = None
    disabled: bool | None = None
    addresses: list[AddressInput] | None = None


class MemberRead(LifecycleRead):
    id: int
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
    addresses: list[AddressRead]


__all__ = [
    "AddressInput",
    "AddressRead",
    "MemberCreate",
    "MemberRead",
    "MemberUpdate",
]
