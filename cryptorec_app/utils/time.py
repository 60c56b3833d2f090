"""
Time helpers for epoch-millisecond timestamps and calendar arithmetic.

Price timestamps are epoch milliseconds and are always converted to aware UTC
datetimes. Calendar dates (day filters) are taken in a configured timezone.
"""

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def epoch_ms_to_datetime(epoch_ms: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Exact for any millisecond value (no float rounding).

    Raises:
        OverflowError: If the value is outside the datetime range
    """
    return EPOCH + timedelta(milliseconds=epoch_ms)


def datetime_to_epoch_ms(ts: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return (ts - EPOCH) // _ONE_MS


def get_zone(name: str) -> timezone | ZoneInfo:
    """Resolve a timezone name, with UTC as the fixed-offset fast path."""
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def calendar_date(ts: datetime, tz: Optional[timezone | ZoneInfo] = None) -> date:
    """Calendar date of a timestamp in the given timezone (UTC by default)."""
    return ts.astimezone(tz or timezone.utc).date()


def months_before(moment: datetime, months: int) -> datetime:
    """
    Subtract calendar months from a datetime.

    The day of month is clamped to the last day of the target month,
    so 31 March minus one month is 28 (or 29) February.
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def utc_now() -> datetime:
    """Wall-clock now as aware UTC datetime."""
    return datetime.now(timezone.utc)
