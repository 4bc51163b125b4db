from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time

from ..core.constants import DAYS_PER_WEEK

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date."""
    if not _ISO_DATE.fullmatch(value):
        raise ValueError(f"Invalid date string: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def days_in_month(year: int, month: int) -> int:
    """Length of a month in the proleptic Gregorian calendar."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the month, both inclusive."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def day_of_week(value: date) -> int:
    """Day of week with 0 = Sunday through 6 = Saturday."""
    # date.weekday() is Monday-first.
    return (value.weekday() + 1) % DAYS_PER_WEEK


def hours_between(start: time, end: time) -> float:
    """Elapsed hours between two same-day times of day."""
    start_seconds = start.hour * 3600 + start.minute * 60 + start.second
    end_seconds = end.hour * 3600 + end.minute * 60 + end.second
    return (end_seconds - start_seconds) / 3600.0
