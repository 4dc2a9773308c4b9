"""Use case for creating membership plans."""

from decimal import Decimal

from sqlalchemy.orm import Session

from membership_api.domain.entities import AuditAction, AuditTable, Plan
from membership_api.infrastructure.repositories import PlanRepository

from ..audit_logs import record_audit_entry
from ..lifecycle import resolve_lifecycle


def create_plan(
    session: Session,
    *,
    name: str,
    value: Decimal,
    renew_value: Decimal,
    description: str | None = None,
    gun_target_discount: Decimal = Decimal("0"),
    course_discount: Decimal = Decimal("0"),
    shooting_drills_per_year: int = 0,
    gun_exemption: bool = False,
    target_exemption: bool = False,
    disabled: bool = False,
    created_by: int | None = None,
) -> Plan:
    """Create a plan and record the insertion in the audit ledger."""

    attribution = resolve_lifecycle(created_by, disabled=disabled)
    plan = Plan(
        id=None,
        name=name,
        description=description,
        value=value,
        renew_value=renew_value,
        gun_target_discount=gun_target_discount,
        course_discount=course_discount,
        shooting_drills_per_year=shooting_drills_per_year,
        gun_exemption=gun_exemption,
        target_exemption=target_exemption,
        created_at=None,
        updated_at=None,
        **attribution.as_fields(),
    )

    stored = PlanRepository(session).create(plan)
    record_audit_entry(
        session,
        table=AuditTable.MEMBER_PLAN,
        action=AuditAction.INSERT,
        reference_id=stored.id,
        user_id=created_by,
    )
    return stored
