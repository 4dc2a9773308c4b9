"""Integration tests for the user API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


def test_user_crud_flow(
    client: TestClient, auth_headers: dict[str, str], permission_catalog
) -> None:
    """Exercise creation, lookup, listing and update of users."""

    payload = {
        "name": "Test User",
        "email": "user@example.com",
        "username": "tester",
        "password": "Secret123",
        "permissions": ["read", "read", "write"],
    }

    response = client.post("/users/", json=payload, headers=auth_headers)
    assert response.status_code == 201
    created_user = response.json()
    user_id = created_user["id"]
    assert created_user["permissions"] == ["read", "write"]
    assert "password" not in created_user
    assert created_user["disabled"] is False

    response = client.get(f"/users/{user_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["username"] == "tester"

    response = client.get("/users/", params={"search": "test"}, headers=auth_headers)
    assert response.status_code == 200
    assert [user["id"] for user in response.json()] == [user_id]

    response = client.put(
        f"/users/{user_id}",
        json={"name": "Updated User", "disabled": True},
        headers=auth_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["name"] == "Updated User"
    assert updated["disabled"] is True
    assert updated["disabled_at"] is not None

    response = client.get("/users/", headers=auth_headers)
    assert user_id not in [user["id"] for user in response.json()]


def test_unknown_permissions_are_listed(
    client: TestClient, auth_headers: dict[str, str], permission_catalog
) -> None:
    response = client.post(
        "/users/",
        json={
            "name": "Sem Acesso",
            "email": "sem.acesso@example.com",
            "username": "semacesso",
            "password": "Secret123",
            "permissions": ["read", "admin", "root"],
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "message": "Uma ou mais permissões não existem",
        "nonexistent_permissions": ["admin", "root"],
    }


def test_duplicate_username_is_rejected(
    client: TestClient, auth_headers: dict[str, str], actor
) -> None:
    response = client.post(
        "/users/",
        json={
            "name": "Clone",
            "email": "clone@example.com",
            "username": actor.username,
            "password": "Secret123",
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Nome de usuário já está em uso"


def test_current_user_endpoints(client: TestClient, auth_headers: dict[str, str], actor) -> None:
    response = client.get("/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == actor.id

    response = client.get("/users/me/permissions", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"permissions": ["read", "write"]}


def test_requests_without_token_are_rejected(client: TestClient) -> None:
    response = client.get("/users/")

    assert response.status_code == 401


def test_invalid_token_is_rejected(client: TestClient) -> None:
    response = client.get("/users/me", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


def test_missing_user_returns_404(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.get("/users/999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Usuário não encontrado"


def test_null_for_required_field_is_rejected(
    client: TestClient, auth_headers: dict[str, str], actor
) -> None:
    response = client.put(f"/users/{actor.id}", json={"name": None}, headers=auth_headers)

    assert response.status_code == 422


def test_own_permissions_follow_the_stored_grants(
    client: TestClient, auth_headers: dict[str, str], actor, permission_catalog
) -> None:
    response = client.put(
        f"/users/{actor.id}",
        json={"permissions": ["audit", "read", "audit"]},
        headers=auth_headers,
    )
    assert response.status_code == 200

    response = client.get("/users/me/permissions", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"permissions": ["audit", "read"]}
