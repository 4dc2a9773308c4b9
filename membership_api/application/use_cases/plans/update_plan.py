"""Use case for updating membership plans."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from membership_api.domain.entities import ActorAttribution, AuditAction, AuditTable, Plan
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.repositories import PlanRepository

from ..audit_logs import record_audit_entry
from ..lifecycle import UNSET, resolve_lifecycle

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "value",
        "renew_value",
        "gun_target_discount",
        "course_discount",
        "shooting_drills_per_year",
        "gun_exemption",
        "target_exemption",
    }
)


def update_plan(
    session: Session,
    *,
    plan_id: int,
    changes: Mapping[str, Any],
    updated_by: int | None = None,
) -> Plan:
    """Apply ``changes`` to a plan.

    Only keys present in ``changes`` are written; a missing ``disabled`` key
    keeps the current enable/disable state.
    """

    repository = PlanRepository(session)
    current = repository.get(plan_id)
    if current is None:
        raise NotFoundError("Plano não encontrado")

    attribution = resolve_lifecycle(
        updated_by,
        disabled=changes.get("disabled", UNSET),
        existing=ActorAttribution.of(current),
    )
    values = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
    updated = repository.update(replace(current, **values, **attribution.as_fields()))

    record_audit_entry(
        session,
        table=AuditTable.MEMBER_PLAN,
        action=AuditAction.UPDATE,
        reference_id=updated.id,
        user_id=updated_by,
    )
    return updated
