"""Month grid computation for the calendar view."""

from __future__ import annotations

import calendar
from datetime import date

MONDAY = calendar.MONDAY
SUNDAY = calendar.SUNDAY


def month_grid(year: int, month: int, first_weekday: int = SUNDAY) -> list[list[date | None]]:
    """Return the weeks of *month* as rows of seven cells.

    Cells outside the month are ``None``. Rows start on *first_weekday*
    (``calendar.MONDAY`` .. ``calendar.SUNDAY``).

    Raises:
        ValueError: month outside 1..12 or weekday outside 0..6
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if not 0 <= first_weekday <= 6:
        raise ValueError(f"first_weekday must be in 0..6, got {first_weekday}")

    cal = calendar.Calendar(firstweekday=first_weekday)
    return [
        [day if day.month == month else None for day in week]
        for week in cal.monthdatescalendar(year, month)
    ]


def weekday_headers(first_weekday: int = SUNDAY) -> list[str]:
    """Two-letter weekday names in grid order."""
    return [calendar.day_abbr[(first_weekday + i) % 7][:2] for i in range(7)]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by *delta* months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
