"""Tests for the plan use cases."""

from decimal import Decimal

import pytest

from membership_api.application.use_cases.plans import (
    create_plan,
    get_plan,
    list_plans,
    update_plan,
)
from membership_api.domain.errors import NotFoundError
from membership_api.utils import now_in_app_timezone


def test_create_plan_attributes_the_actor(session, actor) -> None:
    plan = create_plan(
        session,
        name="Plano Anual",
        value=Decimal("300.00"),
        renew_value=Decimal("250.00"),
        gun_exemption=True,
        created_by=actor.id,
    )

    stored = get_plan(session, plan.id)
    assert stored.name == "Plano Anual"
    assert stored.value == Decimal("300.00")
    assert stored.gun_exemption is True
    assert stored.created_by == actor.id
    assert stored.last_updated_by == actor.id
    assert stored.disabled is False
    assert stored.created_at is not None


def test_disabling_a_plan_records_who_and_when(session, plan) -> None:
    before = now_in_app_timezone()

    updated = update_plan(
        session, plan_id=plan.id, changes={"disabled": True}, updated_by=7
    )

    after = now_in_app_timezone()
    assert updated.disabled is True
    assert updated.last_disabled_by == 7
    assert updated.last_updated_by == 7
    assert updated.created_by == plan.created_by
    assert before.replace(microsecond=0) <= updated.disabled_at <= after


def test_update_leaves_omitted_fields_untouched(session, plan) -> None:
    updated = update_plan(
        session,
        plan_id=plan.id,
        changes={"description": "Inclui munição"},
        updated_by=plan.created_by,
    )

    assert updated.description == "Inclui munição"
    assert updated.name == plan.name
    assert updated.value == plan.value
    assert updated.shooting_drills_per_year == plan.shooting_drills_per_year


def test_description_can_be_cleared(session, actor) -> None:
    plan = create_plan(
        session,
        name="Plano Mensal",
        description="Temporário",
        value=Decimal("30"),
        renew_value=Decimal("30"),
        created_by=actor.id,
    )

    updated = update_plan(
        session, plan_id=plan.id, changes={"description": None}, updated_by=actor.id
    )

    assert updated.description is None


def test_reenabling_clears_the_disable_stamp(session, plan) -> None:
    update_plan(session, plan_id=plan.id, changes={"disabled": True}, updated_by=7)

    updated = update_plan(session, plan_id=plan.id, changes={"disabled": False}, updated_by=8)

    assert updated.disabled is False
    assert updated.disabled_at is None
    assert updated.last_disabled_by is None


def test_list_hides_disabled_plans_by_default(session, actor, plan) -> None:
    other = create_plan(
        session,
        name="Plano Antigo",
        value=Decimal("10"),
        renew_value=Decimal("10"),
        disabled=True,
        created_by=actor.id,
    )

    assert [item.id for item in list_plans(session)] == [plan.id]
    assert {item.id for item in list_plans(session, only_enabled=False)} == {plan.id, other.id}


def test_list_searches_every_word(session, actor, plan) -> None:
    create_plan(
        session,
        name="Plano Prata Família",
        value=Decimal("90"),
        renew_value=Decimal("80"),
        created_by=actor.id,
    )

    names = [item.name for item in list_plans(session, search="prata plano")]

    assert names == ["Plano Prata Família"]


def test_updating_a_missing_plan_raises(session) -> None:
    with pytest.raises(NotFoundError, match="Plano não encontrado"):
        update_plan(session, plan_id=404, changes={"name": "X"}, updated_by=1)
