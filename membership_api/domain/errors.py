"""Errors raised by use cases and repositories.

All of them subclass :class:`ValueError` so handlers written against plain
``ValueError`` keep working; routes use the concrete type to pick a status code.
"""

from collections.abc import Sequence


class NotFoundError(ValueError):
    """The record targeted by a lookup or update does not exist."""


class ConflictError(ValueError):
    """A uniqueness rule is violated or a referenced record does not exist."""


class UnknownPermissionsError(ValueError):
    """One or more submitted permissions are not part of the catalog."""

    message = "Uma ou mais permissões não existem"

    def __init__(self, unknown: Sequence[str]) -> None:
        super().__init__(self.message)
        self.unknown = list(unknown)


__all__ = ["ConflictError", "NotFoundError", "UnknownPermissionsError"]
