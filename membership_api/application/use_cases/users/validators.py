"""Common validation helpers for user use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from membership_api.domain.errors import UnknownPermissionsError

logger = logging.getLogger(__name__)


class PermissionCatalog(Protocol):
    """Lookup answering which permission ids exist."""

    def existing_permissions(self, permission_ids: Iterable[str]) -> set[str]: ...


@dataclass(frozen=True)
class PermissionValidation:
    """Outcome of checking a submitted permission list against the catalog."""

    accepted: tuple[str, ...]
    unknown: tuple[str, ...]

    @property
    def is_valid(self) -> bool:
        return not self.unknown


def deduplicate(values: Iterable[str]) -> list[str]:
    """Return ``values`` without repeats, keeping the first occurrence order."""

    return list(dict.fromkeys(values))


def validate_permissions(
    submitted: Sequence[str], catalog: PermissionCatalog
) -> PermissionValidation:
    """Deduplicate ``submitted`` and split it into catalog and unknown ids."""

    distinct = deduplicate(submitted)
    known = catalog.existing_permissions(distinct)
    return PermissionValidation(
        accepted=tuple(permission for permission in distinct if permission in known),
        unknown=tuple(permission for permission in distinct if permission not in known),
    )


def ensure_valid_permissions(
    submitted: Sequence[str], catalog: PermissionCatalog
) -> list[str]:
    """Return the deduplicated permissions or reject the whole list.

    Raises :class:`UnknownPermissionsError` listing every unknown id when any
    entry is missing from the catalog; no subset is ever accepted.
    """

    validation = validate_permissions(submitted, catalog)
    if not validation.is_valid:
        logger.info("Rejected permission set with unknown ids: %s", list(validation.unknown))
        raise UnknownPermissionsError(validation.unknown)
    return list(validation.accepted)


__all__ = [
    "PermissionCatalog",
    "PermissionValidation",
    "deduplicate",
    "ensure_valid_permissions",
    "validate_permissions",
]
