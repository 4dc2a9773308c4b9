"""Use cases for managing users."""

from .create_user import create_user
from .get_user import get_user, get_user_permissions
from .list_users import list_users
from .update_user import update_user
from .validators import (
    PermissionValidation,
    ensure_valid_permissions,
    validate_permissions,
)

__all__ = [
    "PermissionValidation",
    "create_user",
    "ensure_valid_permissions",
    "get_user",
    "get_user_permissions",
    "list_users",
    "update_user",
    "validate_permissions",
]
