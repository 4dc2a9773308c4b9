"""Use cases for storing a member's addresses.

Creating a member stores every submitted address as-is. Updating a member
reconciles the submitted addresses against the stored ones by their
``(zipcode, number)`` key:

* no stored address shares the zipcode: the submitted address is inserted;
* otherwise every stored address with that zipcode is compared by number. An
  equal number updates that row in place; each different number inserts the
  submitted address once more.

Stored addresses missing from the submission are left untouched; nothing is
ever deleted here. When two or more stored addresses share a zipcode,
resubmitting the same collection inserts again on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from sqlalchemy.orm import Session

from membership_api.domain.entities import Address, AuditAction, AuditTable
from membership_api.infrastructure.repositories import AddressRepository

from ..audit_logs import record_audit_entry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewAddressData:
    """Address fields submitted by a client."""

    street: str
    number: str
    neighbourhood: str
    zipcode: str
    city_id: int
    complement: str | None = None


@dataclass
class ReconciliationResult:
    """Addresses written while reconciling a submission."""

    inserted: list[Address] = field(default_factory=list)
    updated: list[Address] = field(default_factory=list)


def _build_address(
    member_id: int, payload: NewAddressData, *, acting_user_id: int | None
) -> Address:
    return Address(
        id=None,
        member_id=member_id,
        street=payload.street,
        number=str(payload.number),
        neighbourhood=payload.neighbourhood,
        complement=payload.complement,
        zipcode=payload.zipcode,
        city_id=payload.city_id,
        created_by=acting_user_id,
        created_at=None,
        last_updated_by=acting_user_id,
        updated_at=None,
    )


def add_member_addresses(
    session: Session,
    *,
    member_id: int,
    addresses: Sequence[NewAddressData],
    acting_user_id: int | None,
) -> list[Address]:
    """Insert all ``addresses`` for a newly created member without matching."""

    repository = AddressRepository(session)
    created = repository.create_many(
        [_build_address(member_id, payload, acting_user_id=acting_user_id) for payload in addresses]
    )
    for address in created:
        record_audit_entry(
            session,
            table=AuditTable.ADDRESS,
            action=AuditAction.INSERT,
            reference_id=address.id,
            user_id=acting_user_id,
        )
    return created


def reconcile_addresses(
    session: Session,
    *,
    member_id: int,
    addresses: Sequence[NewAddressData],
    acting_user_id: int | None,
) -> ReconciliationResult:
    """Match each submitted address against the member's stored addresses.

    Candidates are queried again for every submitted address, so addresses
    inserted earlier in the same call take part in later matches.
    """

    repository = AddressRepository(session)
    result = ReconciliationResult()

    for payload in addresses:
        candidates = repository.list_by_zipcode(member_id, payload.zipcode)
        if not candidates:
            result.inserted.append(
                _insert(repository, session, member_id, payload, acting_user_id)
            )
            continue

        for stored in candidates:
            if stored.matches(payload.zipcode, payload.number):
                result.updated.append(
                    _overwrite(repository, session, stored, payload, acting_user_id)
                )
            else:
                result.inserted.append(
                    _insert(repository, session, member_id, payload, acting_user_id)
                )

    logger.debug(
        "Reconciled addresses of member %s: %d inserted, %d updated",
        member_id,
        len(result.inserted),
        len(result.updated),
    )
    return result


def _insert(
    repository: AddressRepository,
    session: Session,
    member_id: int,
    payload: NewAddressData,
    acting_user_id: int | None,
) -> Address:
    address = repository.create(
        _build_address(member_id, payload, acting_user_id=acting_user_id)
    )
    record_audit_entry(
        session,
        table=AuditTable.ADDRESS,
        action=AuditAction.INSERT,
        reference_id=address.id,
        user_id=acting_user_id,
    )
    return address


def _overwrite(
    repository: AddressRepository,
    session: Session,
    stored: Address,
    payload: NewAddressData,
    acting_user_id: int | None,
) -> Address:
    address = repository.update(
        replace(
            stored,
            street=payload.street,
            number=str(payload.number),
            neighbourhood=payload.neighbourhood,
            complement=payload.complement,
            zipcode=payload.zipcode,
            city_id=payload.city_id,
            last_updated_by=acting_user_id,
        )
    )
    record_audit_entry(
        session,
        table=AuditTable.ADDRESS,
        action=AuditAction.UPDATE,
        reference_id=address.id,
        user_id=acting_user_id,
    )
    return address


__all__ = [
    "NewAddressData",
    "ReconciliationResult",
    "add_member_addresses",
    "reconcile_addresses",
]
