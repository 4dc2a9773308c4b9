"""Rotas para administrar usuários e suas permissões."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from membership_api.application.use_cases.users import (
    create_user as create_user_uc,
    get_user as get_user_uc,
    get_user_permissions as get_user_permissions_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from membership_api.domain.entities import User
from membership_api.infrastructure.database import get_db
from membership_api.interfaces.api.dependencies import get_current_active_user
from membership_api.interfaces.api.routes_helpers import to_http_exception
from membership_api.interfaces.api.schemas import (
    UserCreate,
    UserPermissionsRead,
    UserRead,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Cria um novo usuário com as permissões informadas."""

    try:
        user = create_user_uc(db, **user_in.model_dump(), created_by=current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Devolve as informações do usuário autenticado."""

    return _to_read_model(current_user)


@router.get("/me/permissions", response_model=UserPermissionsRead)
def read_current_user_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Devolve as permissões do usuário autenticado."""

    try:
        permissions = get_user_permissions_uc(db, current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UserPermissionsRead(permissions=permissions)


@router.get("/", response_model=list[UserRead])
def list_users(
    only_enabled: bool = True,
    search: str = "",
    sort_by: str = Query("name", pattern="^(name|email|username|created_at)$"),
    sort_order: str = Query("asc", pattern="^(asc|desc)$"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista os usuários cadastrados."""

    users = list_users_uc(
        db,
        only_enabled=only_enabled,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [_to_read_model(user) for user in users]


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Obtém o usuário identificado por ``user_id``."""

    try:
        user = get_user_uc(db, user_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Atualiza os dados de um usuário existente."""

    try:
        user = update_user_uc(
            db,
            user_id=user_id,
            changes=user_in.changes(),
            updated_by=current_user.id,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)
