from .audit_log import AuditLogRead
from .member import AddressInput, AddressRead, MemberCreate, MemberRead, MemberUpdate
from .permission import PermissionRead
from .plan import PlanCreate, PlanRead, PlanUpdate
from .user import UserCreate, UserPermissionsRead, UserRead, UserUpdate

__all__ = [
    "AddressInput",
    "AddressRead",
    "AuditLogRead",
    "MemberCreate",
    "MemberRead",
    "MemberUpdate",
    "PermissionRead",
    "PlanCreate",
    "PlanRead",
    "PlanUpdate",
    "UserCreate",
    "UserPermissionsRead",
    "UserRead",
    "UserUpdate",
]
