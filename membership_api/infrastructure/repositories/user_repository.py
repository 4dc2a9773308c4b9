"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from membership_api.domain.entities import User
from membership_api.domain.errors import ConflictError, NotFoundError
from membership_api.infrastructure.models import UserModel
from membership_api.utils import ensure_app_naive_datetime, ensure_app_timezone

from .search import build_search_filter

_SORTABLE_COLUMNS = {
    "name": UserModel.name,
    "email": UserModel.email,
    "username": UserModel.username,
    "created_at": UserModel.created_at,
}


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        only_enabled: bool = True,
        search: str | None = None,
        sort_by: str = "name",
        sort_order: str = "asc",
    ) -> Sequence[User]:
        query = self.session.query(UserModel)
        if only_enabled:
            query = query.filter(UserModel.disabled.is_(False))
        search_filter = build_search_filter(
            search, (UserModel.name, UserModel.username, UserModel.email)
        )
        if search_filter is not None:
            query = query.filter(search_filter)

        column = _SORTABLE_COLUMNS.get(sort_by, UserModel.name)
        ordering = column.desc() if sort_order.lower() == "desc" else column.asc()
        query = query.order_by(ordering, UserModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.query(UserModel).filter_by(email=email).first()
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = self.session.query(UserModel).filter_by(username=username).first()
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("Nome de usuário ou e-mail já está em uso") from exc

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            username=model.username,
            password=model.password,
            permissions=list(model.permissions or []),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            last_updated_by=model.last_updated_by,
            updated_at=ensure_app_timezone(model.updated_at),
            disabled=model.disabled,
            disabled_at=ensure_app_timezone(model.disabled_at),
            last_disabled_by=model.last_disabled_by,
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_by = user.created_by
        model.name = user.name
        model.email = user.email
        model.username = user.username
        model.password = user.password
        model.permissions = list(user.permissions)
        model.last_updated_by = user.last_updated_by
        model.disabled = user.disabled
        model.disabled_at = ensure_app_naive_datetime(user.disabled_at)
        model.last_disabled_by = user.last_disabled_by


__all__ = ["UserRepository"]
