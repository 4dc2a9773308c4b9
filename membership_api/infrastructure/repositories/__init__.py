"""Repository implementations for infrastructure layer."""

from .address_repository import AddressRepository
from .audit_log_repository import AuditLogRepository
from .member_repository import MemberRepository
from .permission_repository import PermissionRepository
from .plan_repository import PlanRepository
from .user_repository import UserRepository

__all__ = [
    "AddressRepository",
    "AuditLogRepository",
    "MemberRepository",
    "PermissionRepository",
    "PlanRepository",
    "UserRepository",
]
