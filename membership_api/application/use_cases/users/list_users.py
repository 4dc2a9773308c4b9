"""Use case for listing users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import User
from membership_api.infrastructure.repositories import UserRepository


def list_users(
    session: Session,
    *,
    only_enabled: bool = True,
    search: str | None = None,
    sort_by: str = "name",
    sort_order: str = "asc",
) -> Sequence[User]:
    """Return users matching ``search`` in the requested order."""

    repository = UserRepository(session)
    return repository.list(
        only_enabled=only_enabled,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
