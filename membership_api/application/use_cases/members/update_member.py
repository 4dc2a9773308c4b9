"""Use case for updating members and reconciling their addresses."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from membership_api.domain.entities import ActorAttribution, AuditAction, AuditTable, Member
from membership_api.domain.errors import ConflictError, NotFoundError
from membership_api.infrastructure.repositories import MemberRepository, PlanRepository

from ..audit_logs import record_audit_entry
from ..lifecycle import UNSET, resolve_lifecycle
from .addresses import NewAddressData, reconcile_addresses

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "rg",
        "issuing_authority",
        "cpf",
        "naturality_city_id",
        "mother_name",
        "father_name",
        "profession",
        "email",
        "phone",
        "cell_phone",
        "cr_number",
        "issued_at",
        "birth_date",
        "cr_validity",
        "health_issues",
        "gender",
        "marital_status",
        "blood_typing",
        "plan_id",
    }
)


def update_member(
    session: Session,
    *,
    member_id: int,
    changes: Mapping[str, Any],
    addresses: Sequence[NewAddressData] | None = None,
    updated_by: int | None = None,
) -> Member:
    """Apply ``changes`` to a member, then reconcile ``addresses`` if any were sent.

    Keys absent from ``changes`` are left untouched. The email is checked for
    uniqueness only when it changes and the plan only when it is supplied.
    """

    repository = MemberRepository(session)
    current = repository.get(member_id)
    if current is None:
        raise NotFoundError("Membro não encontrado")

    new_email = changes.get("email")
    if new_email and new_email != current.email:
        if repository.get_by_email(new_email):
            raise ConflictError("E-mail já está em uso")

    if "plan_id" in changes and PlanRepository(session).get(changes["plan_id"]) is None:
        raise ConflictError("Plano não encontrado")

    attribution = resolve_lifecycle(
        updated_by,
        disabled=changes.get("disabled", UNSET),
        existing=ActorAttribution.of(current),
    )
    values = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
    updated = repository.update(replace(current, **values, **attribution.as_fields()))

    record_audit_entry(
        session,
        table=AuditTable.MEMBER,
        action=AuditAction.UPDATE,
        reference_id=updated.id,
        user_id=updated_by,
    )

    if addresses:
        reconcile_addresses(
            session,
            member_id=updated.id,
            addresses=addresses,
            acting_user_id=updated_by,
        )

    return repository.get(member_id)
