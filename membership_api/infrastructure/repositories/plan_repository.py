"""Persistence layer for membership plans."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import Plan
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.models import PlanModel
from membership_api.utils import ensure_app_naive_datetime, ensure_app_timezone

from .search import build_search_filter


class PlanRepository:
    """Provide CRUD operations for :class:`Plan` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, only_enabled: bool = True, search: str | None = None) -> Sequence[Plan]:
        query = self.session.query(PlanModel)
        if only_enabled:
            query = query.filter(PlanModel.disabled.is_(False))
        search_filter = build_search_filter(search, (PlanModel.name,))
        if search_filter is not None:
            query = query.filter(search_filter)
        query = query.order_by(PlanModel.created_at, PlanModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, plan_id: int) -> Plan | None:
        model = self.session.get(PlanModel, plan_id)
        return self._to_entity(model) if model else None

    def create(self, plan: Plan) -> Plan:
        model = PlanModel()
        self._apply_entity_to_model(model, plan, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, plan: Plan) -> Plan:
        model = self.session.get(PlanModel, plan.id)
        if not model:
            msg = f"Plan with id {plan.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, plan, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PlanModel) -> Plan:
        return Plan(
            id=model.id,
            name=model.name,
            description=model.description,
            value=model.value,
            renew_value=model.renew_value,
            gun_target_discount=model.gun_target_discount,
            course_discount=model.course_discount,
            shooting_drills_per_year=model.shooting_drills_per_year,
            gun_exemption=model.gun_exemption,
            target_exemption=model.target_exemption,
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
        model: PlanModel, plan: Plan, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_by = plan.created_by
        model.name = plan.name
        model.description = plan.description
        model.value = plan.value
        model.renew_value = plan.renew_value
        model.gun_target_discount = plan.gun_target_discount
        model.course_discount = plan.course_discount
        model.shooting_drills_per_year = plan.shooting_drills_per_year
        model.gun_exemption = plan.gun_exemption
        model.target_exemption = plan.target_exemption
        model.last_updated_by = plan.last_updated_by
        model.disabled = plan.disabled
        model.disabled_at = ensure_app_naive_datetime(plan.disabled_at)
        model.last_disabled_by = plan.last_disabled_by


__all__ = ["PlanRepository"]
