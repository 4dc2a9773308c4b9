"""Domain entity representing an entry of the permission catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Permission:
    """A permission that can be granted to users."""

    id: str
    description: str


__all__ = ["Permission"]
