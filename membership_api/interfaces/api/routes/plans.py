"""Rotas para administrar os planos de associação."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from membership_api.application.use_cases.plans import (
    create_plan as create_plan_uc,
    get_plan as get_plan_uc,
    list_plans as list_plans_uc,
    update_plan as update_plan_uc,
)
from membership_api.domain.entities import Plan, User
from membership_api.infrastructure.database import get_db
from membership_api.interfaces.api.dependencies import get_current_active_user
from membership_api.interfaces.api.routes_helpers import to_http_exception
from membership_api.interfaces.api.schemas import PlanCreate, PlanRead, PlanUpdate

router = APIRouter(prefix="/plans", tags=["plans"])


def _to_read_model(plan: Plan) -> PlanRead:
    return PlanRead.model_validate(plan)


@router.post("/", response_model=PlanRead, status_code=status.HTTP_201_CREATED)
def create_plan(
    plan_in: PlanCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Cadastra um novo plano."""

    plan = create_plan_uc(db, **plan_in.model_dump(), created_by=current_user.id)
    return _to_read_model(plan)


@router.get("/", response_model=list[PlanRead])
def list_plans(
    only_enabled: bool = True,
    search: str = "",
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Lista os planos cadastrados."""

    plans = list_plans_uc(db, only_enabled=only_enabled, search=search)
    return [_to_read_model(plan) for plan in plans]


@router.get("/{plan_id}", response_model=PlanRead)
def read_plan(
    plan_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Obtém o plano identificado por ``plan_id``."""

    try:
        plan = get_plan_uc(db, plan_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(plan)


@router.put("/{plan_id}", response_model=PlanRead)
def update_plan(
    plan_id: int,
    plan_in: PlanUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Atualiza um plano existente, inclusive sua ativação."""

    try:
        plan = update_plan_uc(
            db,
            plan_id=plan_id,
            changes=plan_in.changes(),
            updated_by=current_user.id,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(plan)
