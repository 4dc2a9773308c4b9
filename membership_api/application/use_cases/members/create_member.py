"""Use case for registering members."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import date

from sqlalchemy.orm import Session

from membership_api.domain.entities import AuditAction, AuditTable, Member
from membership_api.domain.errors import ConflictError
from membership_api.infrastructure.repositories import MemberRepository, PlanRepository

from ..audit_logs import record_audit_entry
from ..lifecycle import resolve_lifecycle
from .addresses import NewAddressData, add_member_addresses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewMemberData:
    """Data required to register a member."""

    name: str
    rg: str
    issuing_authority: str
    cpf: str
    naturality_city_id: int
    profession: str
    cell_phone: str
    cr_number: str
    issued_at: date
    birth_date: date
    cr_validity: date
    gender: str
    marital_status: str
    blood_typing: str
    plan_id: int
    mother_name: str | None = None
    father_name: str | None = None
    email: str | None = None
    phone: str | None = None
    health_issues: str | None = None
    disabled: bool = False


def create_member(
    session: Session,
    *,
    data: NewMemberData,
    addresses: Sequence[NewAddressData] = (),
    created_by: int | None = None,
) -> Member:
    """Register a member together with its addresses.

    The email must not belong to another member and the plan must exist. The
    member and each address get their own audit entry.
    """

    repository = MemberRepository(session)

    if data.email and repository.get_by_email(data.email):
        raise ConflictError("E-mail já está em uso")

    if PlanRepository(session).get(data.plan_id) is None:
        raise ConflictError("Plano não encontrado")

    fields = asdict(data)
    disabled = fields.pop("disabled")
    attribution = resolve_lifecycle(created_by, disabled=disabled)
    member = Member(
        id=None,
        created_at=None,
        updated_at=None,
        **fields,
        **attribution.as_fields(),
    )

    stored = repository.create(member)
    record_audit_entry(
        session,
        table=AuditTable.MEMBER,
        action=AuditAction.INSERT,
        reference_id=stored.id,
        user_id=created_by,
    )

    if addresses:
        add_member_addresses(
            session,
            member_id=stored.id,
            addresses=addresses,
            acting_user_id=created_by,
        )

    logger.info("Member %s registered by user %s", stored.id, created_by)
    return repository.get(stored.id)
