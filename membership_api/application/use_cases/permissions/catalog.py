"""Use cases for reading and seeding the permission catalog."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import Permission
from membership_api.infrastructure.repositories import PermissionRepository

DEFAULT_PERMISSIONS: tuple[Permission, ...] = (
    Permission(id="users", description="Gerenciar usuários"),
    Permission(id="members", description="Gerenciar associados"),
    Permission(id="plans", description="Gerenciar planos"),
    Permission(id="audit", description="Consultar auditoria"),
)


def list_permissions(session: Session) -> Sequence[Permission]:
    """Return every permission users can be granted."""

    return PermissionRepository(session).list()


def seed_permissions(
    session: Session, permissions: Sequence[Permission] = DEFAULT_PERMISSIONS
) -> list[Permission]:
    """Store the catalog entries that are missing and return them."""

    return PermissionRepository(session).add_missing(permissions)
