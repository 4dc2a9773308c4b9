"""Domain entities exposed by the application."""

from .address import Address
from .attribution import ActorAttribution, AttributedRecord
from .audit_log import AUDIT_DESCRIPTIONS, AuditAction, AuditLog, AuditTable
from .member import Member
from .permission import Permission
from .plan import Plan
from .user import User

__all__ = [
    "ActorAttribution",
    "Address",
    "AttributedRecord",
    "AUDIT_DESCRIPTIONS",
    "AuditAction",
    "AuditLog",
    "AuditTable",
    "Member",
    "Permission",
    "Plan",
    "User",
]
