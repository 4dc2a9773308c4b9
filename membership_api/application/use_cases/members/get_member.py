"""Use case for retrieving a single member."""

from sqlalchemy.orm import Session

from membership_api.domain.entities import Member
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.repositories import MemberRepository


def get_member(session: Session, member_id: int) -> Member:
    """Return the requested member with its addresses."""

    member = MemberRepository(session).get(member_id)
    if member is None:
        raise NotFoundError("Membro não encontrado")
    return member
