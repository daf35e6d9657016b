"""Tests for calendar and clock helpers."""
from datetime import date, datetime

from life_organizer.dates import (
    day_difference, days_in_month, format_clock, iso_date, minutes_of_day, month_offset,
    parse_date, shift_month, week_dates, weekday_number,
)


def test_days_in_month_january():
    days = days_in_month(2024, 1)
    assert len(days) == 31
    assert days[0] == date(2024, 1, 1)
    assert days == sorted(days)


def test_days_in_month_leap_february():
    assert len(days_in_month(2024, 2)) == 29
    assert len(days_in_month(2023, 2)) == 28


def test_days_in_month_is_restartable():
    assert days_in_month(2024, 4) == days_in_month(2024, 4)


def test_iso_date_zero_padded():
    assert iso_date(date(2024, 3, 7)) == "2024-03-07"


def test_parse_date_accepts_strings_and_datetimes():
    assert parse_date("2024-03-07") == date(2024, 3, 7)
    assert parse_date(datetime(2024, 3, 7, 23, 59)) == date(2024, 3, 7)
    assert parse_date(date(2024, 3, 7)) == date(2024, 3, 7)


def test_day_difference_is_absolute():
    assert day_difference("2024-01-01", "2024-01-11") == 10
    assert day_difference("2024-01-11", "2024-01-01") == 10
    assert day_difference("2024-01-01", "2024-01-01") == 0


def test_format_clock_wraps_hours():
    assert format_clock(8, 5) == "08:05"
    assert format_clock(25, 30) == "01:30"


def test_minutes_of_day():
    assert minutes_of_day("10:50") == 650


def test_weekday_number_monday_to_sunday():
    assert weekday_number(date(2024, 1, 1)) == 1  # Monday
    assert weekday_number(date(2024, 1, 7)) == 7  # Sunday


def test_month_offset_monday_first():
    assert month_offset(2024, 1) == 0  # starts on a Monday
    assert month_offset(2024, 9) == 6  # starts on a Sunday


def test_shift_month_across_years():
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    assert shift_month(2024, 5, 0) == (2024, 5)


def test_week_dates_start_on_monday():
    week = week_dates(date(2024, 1, 4))
    assert week[0] == date(2024, 1, 1)
    assert week[-1] == date(2024, 1, 7)
