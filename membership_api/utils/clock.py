"""Wall-clock helpers for lifecycle stamps and audit timestamps.

Every timestamp the application writes (``created_at``, ``updated_at``,
``disabled_at`` and ledger entries) is taken in the configured
``APP_TIMEZONE``. Columns are naive ``DATETIME`` so the same wall-clock value
round-trips on SQLite and PostgreSQL; repositories convert on the way in and
out.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from membership_api.config import get_settings

FALLBACK_TIMEZONE = "America/Sao_Paulo"

# Accepts "UTC-3", "GMT+05:30" and "UTC-0300".
_UTC_OFFSET = re.compile(r"^(?:UTC|GMT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone named by ``APP_TIMEZONE``.

    IANA names win; fixed ``UTC±HH[:MM]`` offsets are the second choice and
    anything unrecognised falls back to São Paulo time.
    """

    name = (get_settings().app_timezone or "").strip()
    if not name:
        return ZoneInfo(FALLBACK_TIMEZONE)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    return _fixed_offset(name) or ZoneInfo(FALLBACK_TIMEZONE)


def _fixed_offset(name: str) -> timezone | None:
    match = _UTC_OFFSET.match(name)
    if match is None:
        return None
    sign, hours, minutes = match.groups()
    offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return timezone(-offset if sign == "-" else offset)


def now_in_app_timezone() -> datetime:
    """Return an aware ``datetime`` for the current instant in the app timezone."""

    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Read a stored value: naive values are app-local, aware ones are converted."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Prepare a value for a naive column by dropping the app-local ``tzinfo``."""

    localized = ensure_app_timezone(value)
    return None if localized is None else localized.replace(tzinfo=None)


__all__ = [
    "FALLBACK_TIMEZONE",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_timezone",
]
