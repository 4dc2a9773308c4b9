"""Persistence layer for club members."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from membership_api.domain.entities import Member
from membership_api.domain.errors import ConflictError, NotFoundError
from membership_api.infrastructure.models import MemberModel
from membership_api.utils import ensure_app_naive_datetime, ensure_app_timezone

from .address_repository import AddressRepository
from .search import build_search_filter


class MemberRepository:
    """Provide CRUD operations for member entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, only_enabled: bool = True, search: str | None = None) -> Sequence[Member]:
        query = self.session.query(MemberModel).options(selectinload(MemberModel.addresses))
        if only_enabled:
            query = query.filter(MemberModel.disabled.is_(False))
        search_filter = build_search_filter(
            search, (MemberModel.name, MemberModel.cpf, MemberModel.email)
        )
        if search_filter is not None:
            query = query.filter(search_filter)
        query = query.order_by(MemberModel.name, MemberModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, member_id: int) -> Member | None:
        model = self._get_model(id=member_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> Member | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def create(self, member: Member) -> Member:
        model = MemberModel()
        self._apply_entity_to_model(model, member, include_creation_fields=True)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, member: Member) -> Member:
        model = self._get_model(id=member.id)
        if not model:
            msg = f"Member with id {member.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, member, include_creation_fields=False)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, **filters) -> MemberModel | None:
        return (
            self.session.query(MemberModel)
            .options(selectinload(MemberModel.addresses))
            .filter_by(**filters)
            .first()
        )

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("E-mail já está em uso") from exc

    @staticmethod
    def _to_entity(model: MemberModel) -> Member:
        return Member(
            id=model.id,
            name=model.name,
            rg=model.rg,
            issuing_authority=model.issuing_authority,
            cpf=model.cpf,
            naturality_city_id=model.naturality_city_id,
            mother_name=model.mother_name,
            father_name=model.father_name,
            profession=model.profession,
            email=model.email,
            phone=model.phone,
            cell_phone=model.cell_phone,
            cr_number=model.cr_number,
            issued_at=model.issued_at,
            birth_date=model.birth_date,
            cr_validity=model.cr_validity,
            health_issues=model.health_issues,
            gender=model.gender,
            marital_status=model.marital_status,
            blood_typing=model.blood_typing,
            plan_id=model.plan_id,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            last_updated_by=model.last_updated_by,
            updated_at=ensure_app_timezone(model.updated_at),
            disabled=model.disabled,
            disabled_at=ensure_app_timezone(model.disabled_at),
            last_disabled_by=model.last_disabled_by,
            addresses=[AddressRepository._to_entity(address) for address in model.addresses],
        )

    @staticmethod
    def _apply_entity_to_model(
        model: MemberModel, member: Member, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_by = member.created_by
        model.name = member.name
        model.rg = member.rg
        model.issuing_authority = member.issuing_authority
        model.cpf = member.cpf
        model.naturality_city_id = member.naturality_city_id
        model.mother_name = member.mother_name
        model.father_name = member.father_name
        model.profession = member.profession
        model.email = member.email
        model.phone = member.phone
        model.cell_phone = member.cell_phone
        model.cr_number = member.cr_number
        model.issued_at = member.issued_at
        model.birth_date = member.birth_date
        model.cr_validity = member.cr_validity
        model.health_issues = member.health_issues
        model.gender = member.gender
        model.marital_status = member.marital_status
        model.blood_typing = member.blood_typing
        model.plan_id = member.plan_id
        model.last_updated_by = member.last_updated_by
        model.disabled = member.disabled
        model.disabled_at = ensure_app_naive_datetime(member.disabled_at)
        model.last_disabled_by = member.last_disabled_by


__all__ = ["MemberRepository"]
