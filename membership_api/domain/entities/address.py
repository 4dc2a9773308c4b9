"""Domain entity representing a member address."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Address:
    """Postal address owned by exactly one member.

    Within a member, ``(zipcode, number)`` identifies the address when a new
    address collection is submitted.
    """

    id: int | None
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

    def matches(self, zipcode: str, number: str | int) -> bool:
        """Return ``True`` when the match key equals ``(zipcode, number)``."""

        return self.zipcode == zipcode and str(self.number) == str(number)


__all__ = ["Address"]
