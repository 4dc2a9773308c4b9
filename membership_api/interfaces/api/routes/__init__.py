from fastapi import FastAPI

from .audit_logs import router as audit_logs_router
from .members import router as members_router
from .permissions import router as permissions_router
from .plans import router as plans_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos os routers da API na aplicação FastAPI."""

    app.include_router(audit_logs_router)
    app.include_router(members_router)
    app.include_router(permissions_router)
    app.include_router(plans_router)
    app.include_router(users_router)
