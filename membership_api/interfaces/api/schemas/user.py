"""User schemas."""

from typing import ClassVar

from pydantic import BaseModel, EmailStr, Field

from .base import PartialUpdate, ReadModel
from .lifecycle import LifecycleRead


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    permissions: list[str] | None = None
    disabled: bool = False


class UserUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "email", "username", "disabled"})

    name: str | None = Field(default=None, min_length=1, max_length=120)
    email: EmailStr | None = None
    username: str | None = Field(default=None, min_length=1, max_length=50)
    password: str | None = None
    new_password: str | None = Field(default=None, min_length=1)
    permissions: list[str] | None = None
    disabled: bool | None = None


class UserRead(LifecycleRead):
    id: int
    name: str
    email: EmailStr
    username: str
    permissions: list[str]


class UserPermissionsRead(ReadModel):
    permissions: list[str]


__all__ = ["UserCreate", "UserPermissionsRead", "UserRead", "UserUpdate"]
