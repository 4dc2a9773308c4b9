"""Use cases for retrieving a single user."""

from sqlalchemy.orm import Session

from membership_api.domain.entities import User
from membership_api.domain.errors import NotFoundError
from membership_api.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("Usuário não encontrado")
    return user


def get_user_permissions(session: Session, user_id: int) -> list[str]:
    """Return the permissions granted to ``user_id``."""

    return list(get_user(session, user_id).permissions)
