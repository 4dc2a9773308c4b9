"""Tests for the enable/disable resolver."""

from datetime import datetime

from membership_api.application.use_cases import UNSET, resolve_lifecycle
from membership_api.domain.entities import ActorAttribution

NOW = datetime(2024, 5, 1, 10, 30)


def _disabled_record() -> ActorAttribution:
    return ActorAttribution(
        created_by=1,
        last_updated_by=2,
        disabled=True,
        disabled_at=datetime(2024, 1, 1, 8, 0),
        last_disabled_by=2,
    )


def _enabled_record() -> ActorAttribution:
    return ActorAttribution(
        created_by=1,
        last_updated_by=1,
        disabled=False,
        disabled_at=None,
        last_disabled_by=None,
    )


def test_creation_defaults_to_enabled() -> None:
    attribution = resolve_lifecycle(7, now=NOW)

    assert attribution == ActorAttribution(
        created_by=7,
        last_updated_by=7,
        disabled=False,
        disabled_at=None,
        last_disabled_by=None,
    )


def test_creation_as_disabled_stamps_the_actor() -> None:
    attribution = resolve_lifecycle(7, disabled=True, now=NOW)

    assert attribution.disabled is True
    assert attribution.disabled_at == NOW
    assert attribution.last_disabled_by == 7
    assert attribution.created_by == 7


def test_disabling_an_enabled_record() -> None:
    attribution = resolve_lifecycle(
        7, disabled=True, existing=_enabled_record(), now=NOW
    )

    assert attribution.created_by == 1
    assert attribution.last_updated_by == 7
    assert attribution.disabled is True
    assert attribution.disabled_at == NOW
    assert attribution.last_disabled_by == 7


def test_enabling_clears_the_disable_stamp() -> None:
    attribution = resolve_lifecycle(
        7, disabled=False, existing=_disabled_record(), now=NOW
    )

    assert attribution.disabled is False
    assert attribution.disabled_at is None
    assert attribution.last_disabled_by is None
    assert attribution.last_updated_by == 7


def test_omitted_flag_keeps_the_stored_state() -> None:
    existing = _disabled_record()

    attribution = resolve_lifecycle(7, disabled=UNSET, existing=existing, now=NOW)

    assert attribution.disabled is True
    assert attribution.disabled_at == existing.disabled_at
    assert attribution.last_disabled_by == 2
    assert attribution.last_updated_by == 7


def test_disabling_again_restamps_the_record() -> None:
    attribution = resolve_lifecycle(
        9, disabled=True, existing=_disabled_record(), now=NOW
    )

    assert attribution.disabled_at == NOW
    assert attribution.last_disabled_by == 9


def test_creator_never_changes_on_update() -> None:
    existing = _enabled_record()

    for flag in (UNSET, True, False):
        attribution = resolve_lifecycle(42, disabled=flag, existing=existing, now=NOW)
        assert attribution.created_by == existing.created_by


def test_disable_stamp_uses_current_time_when_not_given() -> None:
    attribution = resolve_lifecycle(3, disabled=True)

    assert isinstance(attribution.disabled_at, datetime)
