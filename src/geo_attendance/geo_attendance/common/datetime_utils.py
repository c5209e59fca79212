from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def minutes_of_day(value: datetime | time) -> int:
    return value.hour * 60 + value.minute


def inclusive_days(start: date, end: date) -> int:
    """Whole days from start to end, both ends counted."""
    return (end - start).days + 1


def covers(start: date, end: date, day: date) -> bool:
    return start <= day <= end
