"""Rotas para administrar associados e seus endereços."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from membership_api.application.use_cases.members import (
    NewAddressData,
    NewMemberData,
    create_member as create_member_uc,
    get_member as get_member_uc,
    list_members as list_members_uc,
    update_member as update_member_uc,
)
from membership_api.domain.entities import Member, User
from membership_api.infrastructure.database import get_db
from membership_api.interfaces.api.dependencies import get_current_active_user
from membership_api.interfaces.api.routes_helpers import to_http_exception
from membership_api.interfaces.api.schemas import (
    AddressInput,
    MemberCreate,
    MemberRead,
    MemberUpdate,
)

router = APIRouter(prefix="/members", tags=["members"])
logger = logging.getLogger(__name__)


def _to_read_model(member: Member) -> MemberRead:
    return MemberRead.model_validate(member)


def _to_address_data(addresses: list[AddressInput]) -> list[NewAddressData]:
    return [NewAddressData(**address.model_dump()) for address in addresses]


@router.post("/", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
def create_member(
    member_in: MemberCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Cadastra um associado com seus endereços."""

    payload = member_in.model_dump(exclude={"addresses"})
    try:
        member = create_member_uc(
            db,
            data=NewMemberData(**payload),
            addresses=_to_address_data(member_in.addresses),
            created_by=current_user.id,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(member)


@router.get("/", response_model=list[MemberRead])
def list_members(
    only_enabled: bool = True,
    search: str = "",
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista os associados, buscando por nome, CPF ou e-mail."""

    members = list_members_uc(db, only_enabled=only_enabled, search=search)
    return [_to_read_model(member) for member in members]


@router.get("/{member_id}", response_model=MemberRead)
def read_member(
    member_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Obtém o associado identificado por ``member_id``."""

    try:
        member = get_member_uc(db, member_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(member)


@router.put("/{member_id}", response_model=MemberRead)
def update_member(
    member_id: int,
    member_in: MemberUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Atualiza um associado.

    Endereços enviados atualizam o endereço com mesmo CEP e número ou são
    incluídos; endereços não enviados permanecem como estão.
    """

    changes = member_in.changes()
    changes.pop("addresses", None)
    addresses = _to_address_data(member_in.addresses) if member_in.addresses else None

    try:
        member = update_member_uc(
            db,
            member_id=member_id,
            changes=changes,
            addresses=addresses,
            updated_by=current_user.id,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc

    logger.debug("Member %s updated by user %s", member_id, current_user.id)
    return _to_read_model(member)
