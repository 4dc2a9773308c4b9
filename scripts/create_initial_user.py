"""Utility script to seed the permission catalog and create the first user."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from membership_api.application.use_cases.permissions import seed_permissions
from membership_api.application.use_cases.users import create_user
from membership_api.infrastructure.database import SessionLocal, initialize_database
from membership_api.infrastructure.repositories import PermissionRepository
from membership_api.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Seed the permission catalog and create the first user of the Membership API.",
    )
    parser.add_argument(
        "--name",
        default="Administrador",
        help="Nome completo do usuário (padrão: Administrador)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="E-mail do usuário (padrão: admin@example.com)",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Nome de usuário (padrão: admin)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Senha do usuário. Se omitida, será solicitada interativamente.",
    )
    parser.add_argument(
        "--print-token",
        action="store_true",
        help="Imprime um token de acesso para o usuário criado.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Informe a senha do usuário: ")
    if not password:
        raise SystemExit("Nenhuma senha válida foi informada.")

    initialize_database()

    session = SessionLocal()
    try:
        seed_permissions(session)
        catalog = [permission.id for permission in PermissionRepository(session).list()]
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            username=args.username,
            password=password,
            permissions=catalog,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Não foi possível criar o usuário: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Erro ao salvar o usuário no banco de dados: {exc}") from exc
    else:
        print(
            "Usuário criado com sucesso:\n"
            f"  ID: {user.id}\n"
            f"  Nome: {user.name}\n"
            f"  E-mail: {user.email}\n"
            f"  Permissões: {', '.join(user.permissions) or '-'}"
        )
        if args.print_token:
            print(f"  Token: {create_access_token(user.id)}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
