"""Use case for retrieving a single plan."""

from sqlalchemy.orm import Session

from membership_api.domain.entities import Plan
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.repositories import PlanRepository


def get_plan(session: Session, plan_id: int) -> Plan:
    """Return the requested plan or raise an error if it does not exist."""

    plan = PlanRepository(session).get(plan_id)
    if plan is None:
        raise NotFoundError("Plano não encontrado")
    return plan
