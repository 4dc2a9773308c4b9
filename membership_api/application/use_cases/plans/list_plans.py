"""Use case for listing plans."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import Plan
from membership_api.infrastructure.repositories import PlanRepository


def list_plans(
    session: Session, *, only_enabled: bool = True, search: str | None = None
) -> Sequence[Plan]:
    """Return plans ordered by creation, optionally hiding disabled ones."""

    return PlanRepository(session).list(only_enabled=only_enabled, search=search)
