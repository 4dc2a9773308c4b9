"""Routes for inspecting audit log entries."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from membership_api.application.use_cases.audit_logs import (
    get_audit_log as get_audit_log_uc,
    list_audit_logs as list_audit_logs_uc,
)
from membership_api.domain.entities import AuditLog, AuditTable, User
from membership_api.infrastructure.database import get_db
from membership_api.interfaces.api.dependencies import get_current_active_user
from membership_api.interfaces.api.routes_helpers import to_http_exception
from membership_api.interfaces.api.schemas import AuditLogRead

router = APIRouter(prefix="/audit-logs", tags=["audit_logs"])


def _audit_log_to_read_model(entry: AuditLog) -> AuditLogRead:
    return AuditLogRead.model_validate(entry)


@router.get("/", response_model=list[AuditLogRead])
def list_audit_logs(
    table_name: AuditTable | None = None,
    reference_id: int | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[AuditLogRead]:
    """Return audit log entries optionally filtered by table and record id."""

    entries = list_audit_logs_uc(
        db,
        table_name=table_name.value if table_name else None,
        reference_id=reference_id,
        skip=skip,
        limit=limit,
    )
    return [_audit_log_to_read_model(entry) for entry in entries]


@router.get("/{entry_id}", response_model=AuditLogRead)
def read_audit_log(
    entry_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> AuditLogRead:
    """Return the audit log entry identified by ``entry_id``."""

    try:
        entry = get_audit_log_uc(db, entry_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _audit_log_to_read_model(entry)


__all__ = ["router"]
