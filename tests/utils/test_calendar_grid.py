"""Tests for the calendar month grid."""

from datetime import date

import pytest

from smartdash_cli.utils.calendar_grid import (
    MONDAY,
    SUNDAY,
    month_grid,
    shift_month,
    weekday_headers,
)


def test_october_2026_sunday_first():
    grid = month_grid(2026, 10)

    # 1 October 2026 is a Thursday
    assert grid[0] == [None, None, None, None, date(2026, 10, 1), date(2026, 10, 2), date(2026, 10, 3)]
    days = [d for week in grid for d in week if d is not None]
    assert days[0] == date(2026, 10, 1)
    assert days[-1] == date(2026, 10, 31)
    assert len(days) == 31


def test_monday_first_shifts_columns():
    grid = month_grid(2026, 10, first_weekday=MONDAY)
    assert grid[0] == [None, None, None, date(2026, 10, 1), date(2026, 10, 2), date(2026, 10, 3), date(2026, 10, 4)]


def test_every_row_has_seven_cells():
    for month in range(1, 13):
        assert all(len(week) == 7 for week in month_grid(2024, month))


def test_leap_february():
    days = [d for week in month_grid(2024, 2) for d in week if d]
    assert days[-1] == date(2024, 2, 29)


@pytest.mark.parametrize("month", [0, 13])
def test_invalid_month(month):
    with pytest.raises(ValueError):
        month_grid(2026, month)


def test_invalid_weekday():
    with pytest.raises(ValueError):
        month_grid(2026, 10, first_weekday=7)


def test_weekday_headers():
    assert weekday_headers(SUNDAY) == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]
    assert weekday_headers(MONDAY)[0] == "Mo"


@pytest.mark.parametrize(
    "year,month,delta,expected",
    [
        (2026, 10, 1, (2026, 11)),
        (2026, 12, 1, (2027, 1)),
        (2026, 1, -1, (2025, 12)),
        (2026, 10, -22, (2024, 12)),
        (2026, 10, 0, (2026, 10)),
    ],
)
def test_shift_month(year, month, delta, expected):
    assert shift_month(year, month, delta) == expected
