"""ORM models used by the application infrastructure."""

from .address import AddressModel
from .audit_log import AuditLogModel
from .member import MemberModel
from .permission import PermissionModel
from .plan import PlanModel
from .user import UserModel

__all__ = [
    "AddressModel",
    "AuditLogModel",
    "MemberModel",
    "PermissionModel",
    "PlanModel",
    "UserModel",
]
