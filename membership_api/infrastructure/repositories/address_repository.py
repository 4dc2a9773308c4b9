"""Persistence layer for member addresses."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from membership_api.domain.entities import Address
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.models import AddressModel
from membership_api.utils import ensure_app_timezone


class AddressRepository:
    """Provide create, read and update access to addresses.

    Addresses are never removed through this repository.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_by_zipcode(self, member_id: int, zipcode: str) -> Sequence[Address]:
        """Return the member's addresses sharing ``zipcode``, oldest first."""

        query = (
            self.session.query(AddressModel)
            .filter(AddressModel.member_id == member_id)
            .filter(AddressModel.zipcode == zipcode)
            .order_by(AddressModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def count_by_member(self, member_id: int) -> int:
        return (
            self.session.query(func.count(AddressModel.id))
            .filter(AddressModel.member_id == member_id)
            .scalar()
        )

    def get(self, address_id: int) -> Address | None:
        model = self.session.get(AddressModel, address_id)
        return self._to_entity(model) if model else None

    def create(self, address: Address) -> Address:
        model = AddressModel()
        self._apply_entity_to_model(model, address, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def create_many(self, addresses: Sequence[Address]) -> list[Address]:
        models: list[AddressModel] = []
        for address in addresses:
            model = AddressModel()
            self._apply_entity_to_model(model, address, include_creation_fields=True)
            self.session.add(model)
            models.append(model)

        if not models:
            return []

        self.session.commit()

        for model in models:
            self.session.refresh(model)

        return [self._to_entity(model) for model in models]

    def update(self, address: Address) -> Address:
        model = self.session.get(AddressModel, address.id)
        if not model:
            msg = f"Address with id {address.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, address, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AddressModel) -> Address:
        return Address(
            id=model.id,
            member_id=model.member_id,
            street=model.street,
            number=model.number,
            neighbourhood=model.neighbourhood,
            complement=model.complement,
            zipcode=model.zipcode,
            city_id=model.city_id,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            last_updated_by=model.last_updated_by,
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: AddressModel, address: Address, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_by = address.created_by
        model.member_id = address.member_id
        model.street = address.street
        model.number = str(address.number)
        model.neighbourhood = address.neighbourhood
        model.complement = address.complement
        model.zipcode = address.zipcode
        model.city_id = address.city_id
        model.last_updated_by = address.last_updated_by


__all__ = ["AddressRepository"]
