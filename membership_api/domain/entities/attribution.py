"""Actor attribution carried by every lifecycle-tracked record."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Protocol


class AttributedRecord(Protocol):
    created_by: int | None
    last_updated_by: int | None
    disabled: bool
    disabled_at: datetime | None
    last_disabled_by: int | None


@dataclass(frozen=True)
class ActorAttribution:
    """Who created, last updated and last disabled a record.

    ``disabled_at`` and ``last_disabled_by`` are either both set (the record was
    disabled by the transition that produced them) or both ``None``.
    """

    created_by: int | None
    last_updated_by: int | None
    disabled: bool
    disabled_at: datetime | None
    last_disabled_by: int | None

    @classmethod
    def of(cls, record: AttributedRecord) -> "ActorAttribution":
        """Return the attribution currently stored on ``record``."""

        return cls(
            created_by=record.created_by,
            last_updated_by=record.last_updated_by,
            disabled=record.disabled,
            disabled_at=record.disabled_at,
            last_disabled_by=record.last_disabled_by,
        )

    def as_fields(self) -> dict[str, Any]:
        """Return the attribution as keyword arguments for ``dataclasses.replace``."""

        return asdict(self)


__all__ = ["ActorAttribution", "AttributedRecord"]
