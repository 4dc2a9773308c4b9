"""Schemas for the permission catalog."""

from .base import ReadModel


class PermissionRead(ReadModel):
    id: str
    description: str


__all__ = ["PermissionRead"]
