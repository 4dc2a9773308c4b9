"""Shared bases for request and response schemas."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class ReadModel(BaseModel):
    """Response schema populated from domain entities."""

    model_config = ConfigDict(from_attributes=True)


class PartialUpdate(BaseModel):
    """Request body where every field is optional and absence means "unchanged".

    Fields listed in ``non_nullable`` may be omitted but never sent as ``null``.
    """

    model_config = ConfigDict(extra="forbid")

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self) -> "PartialUpdate":
        nulled = sorted(
            name
            for name in self.model_fields_set & self.non_nullable
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Campos não podem ser nulos: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client sent."""

        return self.model_dump(exclude_unset=True)
