"""Integration tests for the plan, member and audit log endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

MEMBER_PAYLOAD = {
    "name": "Carlos Lima",
    "rg": "112223334",
    "issuing_authority": "SSP/SP",
    "cpf": "11122233344",
    "naturality_city_id": 3550308,
    "profession": "Analista",
    "email": "carlos@example.com",
    "cell_phone": "11988887777",
    "cr_number": "CR-1234",
    "issued_at": "2012-04-10",
    "birth_date": "1990-08-25",
    "cr_validity": "2031-12-31",
    "gender": "male",
    "marital_status": "single",
    "blood_typing": "APositive",
    "addresses": [
        {
            "street": "Rua das Palmeiras",
            "number": "10",
            "neighbourhood": "Jardim",
            "zipcode": "12345",
            "city_id": 3550308,
        }
    ],
}


def _create_plan(client: TestClient, headers: dict[str, str]) -> dict:
    response = client.post(
        "/plans/",
        json={"name": "Plano Ouro", "value": "150.00", "renew_value": "120.00"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def _create_member(client: TestClient, headers: dict[str, str], plan_id: int) -> dict:
    response = client.post(
        "/members/", json={**MEMBER_PAYLOAD, "plan_id": plan_id}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def test_member_registration_and_address_update(
    client: TestClient, auth_headers: dict[str, str], actor
) -> None:
    plan = _create_plan(client, auth_headers)
    member = _create_member(client, auth_headers, plan["id"])

    assert member["plan_id"] == plan["id"]
    assert member["created_by"] == actor.id
    assert len(member["addresses"]) == 1
    address_id = member["addresses"][0]["id"]

    response = client.put(
        f"/members/{member['id']}",
        json={
            "profession": "Gerente",
            "addresses": [
                {
                    "street": "Avenida Central",
                    "number": "10",
                    "neighbourhood": "Centro",
                    "zipcode": "12345",
                    "city_id": 3550308,
                },
                {
                    "street": "Rua do Sítio",
                    "number": "S/N",
                    "neighbourhood": "Zona Rural",
                    "zipcode": "76543",
                    "city_id": 3509502,
                },
            ],
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["profession"] == "Gerente"
    assert updated["name"] == MEMBER_PAYLOAD["name"]
    streets = {address["id"]: address["street"] for address in updated["addresses"]}
    assert len(streets) == 2
    assert streets[address_id] == "Avenida Central"


def test_member_listing_and_lookup(client: TestClient, auth_headers: dict[str, str]) -> None:
    plan = _create_plan(client, auth_headers)
    member = _create_member(client, auth_headers, plan["id"])

    response = client.get("/members/", params={"search": "carlos"}, headers=auth_headers)
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [member["id"]]

    response = client.get(f"/members/{member['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["cpf"] == MEMBER_PAYLOAD["cpf"]


def test_member_with_unknown_plan_is_rejected(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/members/", json={**MEMBER_PAYLOAD, "plan_id": 999}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Plano não encontrado"


def test_invalid_enum_value_is_rejected(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    plan = _create_plan(client, auth_headers)

    response = client.post(
        "/members/",
        json={**MEMBER_PAYLOAD, "plan_id": plan["id"], "blood_typing": "Z"},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_missing_member_returns_404(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.put("/members/999", json={"name": "Ninguém"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Membro não encontrado"


def test_null_plan_is_rejected(client: TestClient, auth_headers: dict[str, str]) -> None:
    plan = _create_plan(client, auth_headers)
    member = _create_member(client, auth_headers, plan["id"])

    response = client.put(
        f"/members/{member['id']}", json={"plan_id": None}, headers=auth_headers
    )

    assert response.status_code == 422


def test_plan_disable_and_enable(
    client: TestClient, auth_headers: dict[str, str], actor
) -> None:
    plan = _create_plan(client, auth_headers)

    response = client.put(f"/plans/{plan['id']}", json={"disabled": True}, headers=auth_headers)
    assert response.status_code == 200
    disabled = response.json()
    assert disabled["disabled"] is True
    assert disabled["last_disabled_by"] == actor.id
    assert disabled["name"] == "Plano Ouro"

    response = client.get("/plans/", headers=auth_headers)
    assert response.json() == []

    response = client.put(f"/plans/{plan['id']}", json={"disabled": False}, headers=auth_headers)
    assert response.json()["disabled_at"] is None


def test_audit_trail_of_a_member(
    client: TestClient, auth_headers: dict[str, str], actor
) -> None:
    plan = _create_plan(client, auth_headers)
    member = _create_member(client, auth_headers, plan["id"])
    client.put(f"/members/{member['id']}", json={"phone": "1130303030"}, headers=auth_headers)

    response = client.get(
        "/audit-logs/",
        params={"table_name": "members", "reference_id": member["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    entries = response.json()
    assert [entry["action"] for entry in entries] == ["insert", "update"]
    assert all(entry["user_id"] == actor.id for entry in entries)

    response = client.get(f"/audit-logs/{entries[0]['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["description"] == "Registro incluído por usuário"


def test_audit_log_filter_rejects_unknown_tables(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.get("/audit-logs/", params={"table_name": "templates"}, headers=auth_headers)

    assert response.status_code == 422


def test_permission_catalog_listing(
    client: TestClient, auth_headers: dict[str, str], permission_catalog
) -> None:
    response = client.get("/permissions/", headers=auth_headers)

    assert response.status_code == 200
    assert {item["id"] for item in response.json()} == {"read", "write", "audit"}
