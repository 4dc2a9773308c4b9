"""Use case for updating user information."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from membership_api.domain.entities import ActorAttribution, AuditAction, AuditTable, User
from membership_api.domain.errors import ConflictError, NotFoundError
from membership_api.infrastructure.repositories import PermissionRepository, UserRepository
from membership_api.infrastructure.security import get_password_hash, verify_password

from ..audit_logs import record_audit_entry
from ..lifecycle import UNSET, resolve_lifecycle
from .validators import ensure_valid_permissions


def update_user(
    session: Session,
    *,
    user_id: int,
    changes: Mapping[str, Any],
    updated_by: int | None = None,
) -> User:
    """Update the provided user with the values present in ``changes``.

    ``new_password`` replaces the password only when ``password`` holds the
    current one. A bare ``password`` overwrites it directly.
    """

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFoundError("Usuário não encontrado")

    username = changes.get("username")
    if username and username != current_user.username:
        if repository.get_by_username(username):
            raise ConflictError("Nome de usuário já está em uso")

    email = changes.get("email")
    if email and email != current_user.email:
        if repository.get_by_email(email):
            raise ConflictError("E-mail já está em uso")

    new_password = changes.get("new_password")
    password = changes.get("password")
    if new_password:
        if not password or not verify_password(password, current_user.password):
            raise ValueError("Senha atual não confere")
        password = new_password

    permissions = current_user.permissions
    if changes.get("permissions") is not None:
        permissions = ensure_valid_permissions(
            changes["permissions"], PermissionRepository(session)
        )

    attribution = resolve_lifecycle(
        updated_by,
        disabled=changes.get("disabled", UNSET),
        existing=ActorAttribution.of(current_user),
    )
    updated_user = replace(
        current_user,
        name=changes.get("name") or current_user.name,
        email=email or current_user.email,
        username=username or current_user.username,
        permissions=permissions,
        **attribution.as_fields(),
    )

    if password:
        updated_user = replace(updated_user, password=get_password_hash(password))

    stored = repository.update(updated_user)
    record_audit_entry(
        session,
        table=AuditTable.USER,
        action=AuditAction.UPDATE,
        reference_id=stored.id,
        user_id=updated_by,
    )
    return stored
