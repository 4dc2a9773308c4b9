"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an operator of the backend."""

    id: int | None
    name: str
    email: str
    username: str
    password: str
    permissions: list[str] = field(default_factory=list)
    created_by: int | None = None
    created_at: datetime | None = None
    last_updated_by: int | None = None
    updated_at: datetime | None = None
    disabled: bool = False
    disabled_at: datetime | None = None
    last_disabled_by: int | None = None

    @property
    def is_active(self) -> bool:
        return not self.disabled
