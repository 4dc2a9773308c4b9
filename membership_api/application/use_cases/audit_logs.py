"""Use cases for writing to and reading from the audit ledger."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from membership_api.domain.entities import (
    AUDIT_DESCRIPTIONS,
    AuditAction,
    AuditLog,
    AuditTable,
)
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.repositories import AuditLogRepository
from membership_api.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def record_audit_entry(
    session: Session,
    *,
    table: AuditTable,
    action: AuditAction,
    reference_id: int,
    user_id: int | None,
) -> AuditLog | None:
    """Append one ledger entry for a write that has already been committed.

    The ledger is written in its own transaction after the primary write. When
    it fails the primary write stays committed, the failure is logged with the
    full entry and ``None`` is returned instead of raising.
    """

    entry = AuditLog(
        id=None,
        table_name=table.value,
        action=action.value,
        description=AUDIT_DESCRIPTIONS[action],
        reference_id=reference_id,
        user_id=user_id,
        created_at=now_in_app_timezone(),
    )
    try:
        return AuditLogRepository(session).create(entry)
    except SQLAlchemyError:
        session.rollback()
        logger.exception(
            "Audit entry lost: table=%s action=%s reference_id=%s user_id=%s",
            entry.table_name,
            entry.action,
            entry.reference_id,
            entry.user_id,
        )
        return None


def list_audit_logs(
    session: Session,
    *,
    table_name: str | None = None,
    reference_id: int | None = None,
    skip: int = 0,
    limit: int = 100,
) -> list[AuditLog]:
    """Return audit log entries optionally filtered by table and record id."""

    repository = AuditLogRepository(session)
    return repository.list(
        table_name=table_name, reference_id=reference_id, skip=skip, limit=limit
    )


def get_audit_log(session: Session, entry_id: int) -> AuditLog:
    """Return an audit log entry identified by ``entry_id`` or raise an error."""

    repository = AuditLogRepository(session)
    entry = repository.get(entry_id)
    if entry is None:
        raise NotFoundError("Registro de auditoria não encontrado")
    return entry


__all__ = [
    "get_audit_log",
    "list_audit_logs",
    "record_audit_entry",
]
