"""Tests for validating submitted permission lists."""

from collections.abc import Iterable

import pytest

from membership_api.application.use_cases.users.validators import (
    deduplicate,
    ensure_valid_permissions,
    validate_permissions,
)
from membership_api.domain.errors import UnknownPermissionsError


class FakeCatalog:
    def __init__(self, *permission_ids: str) -> None:
        self.permission_ids = set(permission_ids)

    def existing_permissions(self, permission_ids: Iterable[str]) -> set[str]:
        return self.permission_ids.intersection(permission_ids)


def test_deduplicate_keeps_first_occurrence_order() -> None:
    assert deduplicate(["write", "read", "write", "audit", "read"]) == [
        "write",
        "read",
        "audit",
    ]


def test_duplicates_collapse_to_a_single_grant() -> None:
    validation = validate_permissions(["read", "read", "write"], FakeCatalog("read", "write"))

    assert validation.is_valid
    assert validation.accepted == ("read", "write")
    assert validation.unknown == ()


def test_unknown_ids_are_reported_in_submission_order() -> None:
    validation = validate_permissions(
        ["ghost", "read", "phantom", "ghost"], FakeCatalog("read")
    )

    assert not validation.is_valid
    assert validation.accepted == ("read",)
    assert validation.unknown == ("ghost", "phantom")


def test_empty_submission_is_valid() -> None:
    assert ensure_valid_permissions([], FakeCatalog("read")) == []


def test_ensure_rejects_the_whole_list() -> None:
    with pytest.raises(UnknownPermissionsError) as exc_info:
        ensure_valid_permissions(["read", "admin"], FakeCatalog("read"))

    assert exc_info.value.unknown == ["admin"]
    assert str(exc_info.value) == "Uma ou mais permissões não existem"
