from __future__ import annotations

import calendar
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_hhmm(value: datetime) -> str:
    return value.strftime("%H:%M")


def minutes_of_day(hhmm: str) -> int:
    """Convert an HH:MM wall-clock string into minutes since midnight."""
    hours, minutes = hhmm.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def day_of_week(value: str) -> int:
    """Weekday of an ISO date with Sunday as 0 and Saturday as 6."""
    return (parse_iso_date(value).weekday() + 1) % 7


def month_bounds(year: int, month: int) -> tuple[str, str]:
    """First and last ISO dates of a calendar month (month is 1-12)."""
    last_day = calendar.monthrange(int(year), int(month))[1]
    start = date(int(year), int(month), 1)
    end = date(int(year), int(month), last_day)
    return start.isoformat(), end.isoformat()
