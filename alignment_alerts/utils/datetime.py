"""Timezone helpers shared by the queue entities and their persistence layer."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from alignment_alerts.config import get_settings

_FALLBACK_TIMEZONE: Final[str] = "Europe/Istanbul"
_UTC_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone used when stamping queue records.

    ``APP_TIMEZONE`` accepts either an IANA name (``Europe/Istanbul``) or a
    fixed offset such as ``UTC+3``. Unknown values resolve to Istanbul time.
    """

    configured = (get_settings().app_timezone or "").strip()
    return _timezone_from_name(configured or _FALLBACK_TIMEZONE)


def now_in_app_timezone() -> datetime:
    """Return an aware ``datetime`` for the current instant."""

    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default: the current local wall-clock time without ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach (or convert to) the application timezone.

    Naive values coming back from the database are assumed to already be in
    local time.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to local time and drop ``tzinfo`` for storage."""

    aware = ensure_app_timezone(value)
    return aware.replace(tzinfo=None) if aware is not None else None


def _timezone_from_name(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _UTC_OFFSET_PATTERN.match(name)
        if match is None:
            return ZoneInfo(_FALLBACK_TIMEZONE)
        offset = timedelta(
            hours=int(match.group("hours")),
            minutes=int(match.group("minutes") or 0),
        )
        if match.group("sign") == "-":
            offset = -offset
        return timezone(offset)


__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
