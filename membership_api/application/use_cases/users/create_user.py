"""Use case for creating users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import AuditAction, AuditTable, User
from membership_api.domain.errors import ConflictError
from membership_api.infrastructure.repositories import PermissionRepository, UserRepository
from membership_api.infrastructure.security import get_password_hash

from ..audit_logs import record_audit_entry
from ..lifecycle import resolve_lifecycle
from .validators import ensure_valid_permissions


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    username: str,
    password: str,
    permissions: Sequence[str] | None = None,
    disabled: bool = False,
    created_by: int | None = None,
) -> User:
    """Create a new user ensuring unique usernames and email addresses.

    Every permission must exist in the catalog; duplicates are dropped keeping
    the first occurrence.
    """

    repository = UserRepository(session)

    if repository.get_by_username(username):
        raise ConflictError("Nome de usuário já está em uso")

    if repository.get_by_email(email):
        raise ConflictError("E-mail já está em uso")

    granted: list[str] = []
    if permissions is not None:
        granted = ensure_valid_permissions(permissions, PermissionRepository(session))

    attribution = resolve_lifecycle(created_by, disabled=disabled)
    user = User(
        id=None,
        name=name,
        email=email,
        username=username,
        password=get_password_hash(password),
        permissions=granted,
        **attribution.as_fields(),
    )

    stored = repository.create(user)
    record_audit_entry(
        session,
        table=AuditTable.USER,
        action=AuditAction.INSERT,
        reference_id=stored.id,
        user_id=created_by,
    )
    return stored
