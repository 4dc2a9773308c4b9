"""Aggregate application use cases."""

from .audit_logs import record_audit_entry
from .lifecycle import UNSET, resolve_lifecycle
from .members import reconcile_addresses
from .users import validate_permissions

__all__ = [
    "UNSET",
    "reconcile_addresses",
    "record_audit_entry",
    "resolve_lifecycle",
    "validate_permissions",
]
