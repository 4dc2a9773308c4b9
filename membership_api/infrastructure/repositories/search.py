"""Helpers to build free-text search filters for list queries."""

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.elements import ColumnElement


def build_search_filter(
    search: str | None, columns: Sequence[InstrumentedAttribute]
) -> ColumnElement[bool] | None:
    """Return a filter requiring every word of ``search`` to appear in one of ``columns``.

    Matching is case-insensitive. ``None`` is returned for blank searches so
    callers can skip the ``filter`` call entirely.
    """

    words = (search or "").split()
    if not words:
        return None

    clauses = [
        or_(*(column.ilike(f"%{_escape_like(word)}%", escape="\\") for column in columns))
        for word in words
    ]
    return and_(*clauses)


def _escape_like(word: str) -> str:
    return word.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


__all__ = ["build_search_filter"]
