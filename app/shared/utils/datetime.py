"""
UTC datetime and calendar utilities for consistent date arithmetic.

All datetime values in the engine should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

import calendar
from datetime import UTC, date, datetime, time, timedelta


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12
        - datetime.now(UTC) - correct but verbose

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at API boundaries to normalize datetimes coming from the portal.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    # Aware datetime - convert to UTC
    return dt.astimezone(UTC)


def at_midnight(day: date) -> datetime:
    """Return 00:00 UTC of the given calendar day."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month length.

    Args:
        day: Start date.
        months: Number of months to add (negative to go back).

    Returns:
        Shifted date.
    """
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(day.day, days_in_month(year, month)))


def first_of_month(day: date) -> date:
    """Return the first day of the date's month."""
    return day.replace(day=1)


def first_of_quarter(day: date) -> date:
    """Return the first day of the date's calendar quarter."""
    return date(day.year, ((day.month - 1) // 3) * 3 + 1, 1)


def monday_of_week(day: date) -> date:
    """Return the Monday that starts the date's ISO week."""
    return day - timedelta(days=day.weekday())
