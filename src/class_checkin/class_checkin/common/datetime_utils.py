from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Union

from ..core.constants import DATE_KEY_FORMAT

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value.strip(), DATE_KEY_FORMAT).date()


def to_local_date(value: DateLike, tz: tzinfo) -> date:
    """Normalize a date-ish value to a calendar date in ``tz``.

    Aware datetimes are converted to ``tz`` first; naive datetimes are taken as
    wall time in ``tz``; strings must be ``YYYY-MM-DD``.
    """
    if isinstance(value, str):
        return parse_iso_date(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()
    return value


def to_local_datetime(value: datetime, tz: tzinfo) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def now_local(tz: tzinfo) -> datetime:
    """Current time in ``tz``.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)
