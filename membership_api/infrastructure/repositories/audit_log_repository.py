"""Persistence layer for audit log records."""

from typing import Iterable

from sqlalchemy.orm import Session

from membership_api.domain.entities import AuditLog
from membership_api.infrastructure.models import AuditLogModel
from membership_api.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class AuditLogRepository:
    """Append and read :class:`AuditLog` entries.

    The ledger is append-only, so entries can only be created and read.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditLog) -> AuditLog:
        model = AuditLogModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, entry_id: int) -> AuditLog | None:
        """Return an audit entry by its primary key, if present."""

        model = self.session.get(AuditLogModel, entry_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list(
        self,
        *,
        table_name: str | None = None,
        reference_id: int | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[AuditLog]:
        """Return audit entries, optionally filtered by table and record."""

        query = self.session.query(AuditLogModel)
        if table_name is not None:
            query = query.filter(AuditLogModel.table_name == table_name)
        if reference_id is not None:
            query = query.filter(AuditLogModel.reference_id == reference_id)

        models: Iterable[AuditLogModel] = (
            query.order_by(AuditLogModel.id).offset(skip).limit(limit).all()
        )
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: AuditLogModel) -> AuditLog:
        return AuditLog(
            id=model.id,
            table_name=model.table_name,
            action=model.action,
            description=model.description,
            reference_id=model.reference_id,
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: AuditLogModel, entry: AuditLog) -> None:
        model.table_name = entry.table_name
        model.action = entry.action
        model.description = entry.description
        model.reference_id = entry.reference_id
        model.user_id = entry.user_id
        model.created_at = (
            ensure_app_naive_datetime(entry.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )


__all__ = ["AuditLogRepository"]
