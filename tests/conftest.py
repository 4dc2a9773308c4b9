"""Pytest configuration for the Membership API test suite."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable, Generator, Sequence
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "membership_api_test.db"


def _ensure_test_env() -> None:
    """Point the application at a throwaway SQLite database."""

    os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
    os.environ.setdefault("SECRET_KEY", "test-secret")
    os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")
    os.environ["APP_TIMEZONE"] = "America/Sao_Paulo"


_ensure_test_env()

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.orm import Session  # noqa: E402

from membership_api.application.use_cases.members import (  # noqa: E402
    NewAddressData,
    NewMemberData,
    create_member,
)
from membership_api.application.use_cases.plans import create_plan  # noqa: E402
from membership_api.domain.entities import Member, Permission, Plan, User  # noqa: E402
from membership_api.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from membership_api.infrastructure.models import UserModel  # noqa: E402
from membership_api.infrastructure.repositories import (  # noqa: E402
    PermissionRepository,
    UserRepository,
)
from membership_api.infrastructure.security import (  # noqa: E402
    create_access_token,
    get_password_hash,
)

ACTOR_PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def reset_database() -> Generator[None, None, None]:
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session() -> Generator[Session, None, None]:
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def actor(session: Session) -> User:
    """Insert the acting user straight into the table so the ledger stays empty."""

    model = UserModel(
        name="Operador",
        email="operador@example.com",
        username="operador",
        password=get_password_hash(ACTOR_PASSWORD),
        permissions=["read", "write"],
    )
    session.add(model)
    session.commit()
    return UserRepository(session).get(model.id)


@pytest.fixture()
def permission_catalog(session: Session) -> list[Permission]:
    return PermissionRepository(session).add_missing(
        [
            Permission(id="read", description="Leitura"),
            Permission(id="write", description="Escrita"),
            Permission(id="audit", description="Consultar auditoria"),
        ]
    )


@pytest.fixture()
def plan(session: Session, actor: User) -> Plan:
    return create_plan(
        session,
        name="Plano Ouro",
        value=Decimal("120.00"),
        renew_value=Decimal("100.00"),
        shooting_drills_per_year=12,
        created_by=actor.id,
    )


def _member_data(**overrides) -> NewMemberData:
    values = {
        "name": "Maria Souza",
        "rg": "123456789",
        "issuing_authority": "SSP/SP",
        "cpf": "12345678901",
        "naturality_city_id": 3550308,
        "profession": "Engenheira",
        "cell_phone": "11999990000",
        "cr_number": "CR-0001",
        "issued_at": date(2010, 5, 20),
        "birth_date": date(1985, 3, 14),
        "cr_validity": date(2030, 1, 1),
        "gender": "female",
        "marital_status": "married",
        "blood_typing": "OPositive",
        "email": "maria@example.com",
    }
    values.update(overrides)
    return NewMemberData(**values)


def _address(zipcode: str, number: str, **overrides) -> NewAddressData:
    values = {
        "street": "Rua das Flores",
        "number": number,
        "neighbourhood": "Centro",
        "zipcode": zipcode,
        "city_id": 3550308,
        "complement": None,
    }
    values.update(overrides)
    return NewAddressData(**values)


@pytest.fixture()
def member_factory(
    session: Session, plan: Plan, actor: User
) -> Callable[..., Member]:
    """Return a helper registering a member with the given addresses."""

    def _create(addresses: Sequence[NewAddressData] = (), **overrides) -> Member:
        return create_member(
            session,
            data=_member_data(**{"plan_id": plan.id, **overrides}),
            addresses=addresses,
            created_by=actor.id,
        )

    return _create


@pytest.fixture()
def client():
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from membership_api.main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(actor: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(actor.id)}"}


@pytest.fixture()
def make_address() -> Callable[..., NewAddressData]:
    return _address


@pytest.fixture()
def make_member_data(plan: Plan) -> Callable[..., NewMemberData]:
    def _build(**overrides) -> NewMemberData:
        overrides.setdefault("plan_id", plan.id)
        return _member_data(**overrides)

    return _build
