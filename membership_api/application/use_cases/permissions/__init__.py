"""Use cases for the permission catalog."""

from .catalog import DEFAULT_PERMISSIONS, list_permissions, seed_permissions

__all__ = ["DEFAULT_PERMISSIONS", "list_permissions", "seed_permissions"]
