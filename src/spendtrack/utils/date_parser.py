"""Date and timestamp parsing utilities."""

from datetime import date, datetime, time, timedelta
from typing import Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the relative
    forms "today", "yesterday", "tomorrow" and "last/this/next week|month|year".

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    for prefix, offset in (("last ", -1), ("this ", 0), ("next ", 1)):
        if date_str.startswith(prefix):
            period = date_str[len(prefix):]
            if period == "month":
                return (today + relativedelta(months=offset)).replace(day=1)
            if period == "year":
                return today.replace(month=1, day=1) + relativedelta(years=offset)
            if period == "week":
                # Weeks start on Monday
                return today - timedelta(days=today.weekday()) + timedelta(weeks=offset)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 (or free-form) timestamp into a naive local datetime.

    Offset-aware values such as ``2024-01-15T10:00:00Z`` are converted to local
    time so the ledger only ever holds naive local timestamps.

    Raises:
        ValueError: If the string is empty or cannot be parsed
    """
    if not value or not value.strip():
        raise ValueError("Empty timestamp string")
    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{value}': {e}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def to_timestamp(value: Union[datetime, date, str]) -> datetime:
    """Normalize a datetime, date or string to a naive local datetime.

    Plain dates become midnight of that day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        return parse_timestamp(value)
    raise ValueError(f"Cannot convert {type(value).__name__} to a timestamp")


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last calendar day of the month containing day."""
    first = day.replace(day=1)
    last = first + relativedelta(months=1) - timedelta(days=1)
    return first, last


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, this-year, this-week, last-month, last-year, last-week

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    monday = today - timedelta(days=today.weekday())

    if period == "this-month":
        return today.replace(day=1), today
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "this-week":
        return monday, today
    if period == "last-month":
        return month_bounds(today - relativedelta(months=1))
    if period == "last-year":
        start = today.replace(month=1, day=1) - relativedelta(years=1)
        return start, start.replace(month=12, day=31)
    if period == "last-week":
        start = monday - timedelta(days=7)
        return start, start + timedelta(days=6)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
