"""Persistence layer for the permission catalog."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import Permission
from membership_api.infrastructure.models import PermissionModel


class PermissionRepository:
    """Provide read access to the permissions users can be granted."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Permission]:
        query = self.session.query(PermissionModel).order_by(PermissionModel.id)
        return [self._to_entity(model) for model in query.all()]

    def existing_permissions(self, permission_ids: Iterable[str]) -> set[str]:
        """Return the subset of ``permission_ids`` present in the catalog."""

        ids = set(permission_ids)
        if not ids:
            return set()
        rows = (
            self.session.query(PermissionModel.id)
            .filter(PermissionModel.id.in_(ids))
            .all()
        )
        return {permission_id for (permission_id,) in rows}

    def add_missing(self, permissions: Sequence[Permission]) -> list[Permission]:
        """Insert the catalog entries that are not stored yet and return them."""

        known = self.existing_permissions(permission.id for permission in permissions)
        created = [permission for permission in permissions if permission.id not in known]
        for permission in created:
            self.session.add(
                PermissionModel(id=permission.id, description=permission.description)
            )
        if created:
            self.session.commit()
        return created

    @staticmethod
    def _to_entity(model: PermissionModel) -> Permission:
        return Permission(id=model.id, description=model.description)


__all__ = ["PermissionRepository"]
