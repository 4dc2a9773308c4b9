"""Use case for listing members."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from membership_api.domain.entities import Member
from membership_api.infrastructure.repositories import MemberRepository


def list_members(
    session: Session, *, only_enabled: bool = True, search: str | None = None
) -> Sequence[Member]:
    """Return members matching ``search`` by name, CPF or email."""

    return MemberRepository(session).list(only_enabled=only_enabled, search=search)
