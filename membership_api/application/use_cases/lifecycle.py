"""Resolve enable/disable state and actor attribution for a write.

The resolver is pure: it only computes the attribution fields the caller
merges into the entity before persisting it.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Final, Literal

from membership_api.domain.entities import ActorAttribution
from membership_api.utils import now_in_app_timezone


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset.UNSET
"""Marker for a field the client did not send, as opposed to one sent as false."""

DisabledFlag = bool | Literal[_Unset.UNSET]


def resolve_lifecycle(
    acting_user_id: int | None,
    *,
    disabled: DisabledFlag = UNSET,
    existing: ActorAttribution | None = None,
    now: datetime | None = None,
) -> ActorAttribution:
    """Return the attribution resulting from ``acting_user_id`` writing a record.

    Without ``existing`` the write is a creation: the actor becomes creator and
    last updater, and the record starts disabled only when ``disabled`` is
    ``True``.

    With ``existing`` the write is an update: ``created_by`` is carried over and
    the actor becomes the last updater. Supplying ``disabled=True`` stamps
    ``disabled_at``/``last_disabled_by`` again, even if the record was already
    disabled; ``disabled=False`` clears them; leaving ``disabled`` unset keeps
    the stored state and its attribution.
    """

    if existing is None:
        is_disabled = disabled is True
        return _with_disabled_state(
            created_by=acting_user_id,
            acting_user_id=acting_user_id,
            disabled=is_disabled,
            now=now,
        )

    if disabled is UNSET:
        return ActorAttribution(
            created_by=existing.created_by,
            last_updated_by=acting_user_id,
            disabled=existing.disabled,
            disabled_at=existing.disabled_at,
            last_disabled_by=existing.last_disabled_by,
        )

    return _with_disabled_state(
        created_by=existing.created_by,
        acting_user_id=acting_user_id,
        disabled=bool(disabled),
        now=now,
    )


def _with_disabled_state(
    *,
    created_by: int | None,
    acting_user_id: int | None,
    disabled: bool,
    now: datetime | None,
) -> ActorAttribution:
    if not disabled:
        return ActorAttribution(
            created_by=created_by,
            last_updated_by=acting_user_id,
            disabled=False,
            disabled_at=None,
            last_disabled_by=None,
        )
    return ActorAttribution(
        created_by=created_by,
        last_updated_by=acting_user_id,
        disabled=True,
        disabled_at=now or now_in_app_timezone(),
        last_disabled_by=acting_user_id,
    )


__all__ = ["DisabledFlag", "UNSET", "resolve_lifecycle"]
