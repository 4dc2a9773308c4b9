"""Use cases for managing members and their addresses."""

from .addresses import (
    NewAddressData,
    ReconciliationResult,
    add_member_addresses,
    reconcile_addresses,
)
from .create_member import NewMemberData, create_member
from .get_member import get_member
from .list_members import list_members
from .update_member import update_member

__all__ = [
    "NewAddressData",
    "NewMemberData",
    "ReconciliationResult",
    "add_member_addresses",
    "create_member",
    "get_member",
    "list_members",
    "reconcile_addresses",
    "update_member",
]
