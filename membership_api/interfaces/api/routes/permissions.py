"""Rotas para consultar o catálogo de permissões."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from membership_api.application.use_cases.permissions import list_permissions as list_permissions_uc
from membership_api.domain.entities import User
from membership_api.infrastructure.database import get_db
from membership_api.interfaces.api.dependencies import get_current_active_user
from membership_api.interfaces.api.schemas import PermissionRead

router = APIRouter(prefix="/permissions", tags=["permissions"])


@router.get("/", response_model=list[PermissionRead])
def list_permissions(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista as permissões que podem ser concedidas aos usuários."""

    return [PermissionRead.model_validate(permission) for permission in list_permissions_uc(db)]
