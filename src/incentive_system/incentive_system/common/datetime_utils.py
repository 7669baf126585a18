from __future__ import annotations

from datetime import date, datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def in_period(day: date, *, month: int, year: int) -> bool:
    """True when `day` falls in the given calendar month of the given year."""
    return day.month == month and day.year == year
