"""Calendar and clock helpers shared by the resolvers and the CLI."""
import calendar
from datetime import date, datetime, timedelta

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def days_in_month(year: int, month: int) -> list[date]:
    """Every date of the month, ascending. ``month`` is 1-based."""
    _, last = calendar.monthrange(year, month)
    return [date(year, month, day) for day in range(1, last + 1)]


def iso_date(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date(value) -> date:
    """Accept a date, a datetime or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def day_difference(d1, d2) -> int:
    """Absolute number of whole days between two dates."""
    return abs((parse_date(d2) - parse_date(d1)).days)


def format_clock(hour: int, minute: int) -> str:
    return f"{hour % 24:02d}:{minute % 60:02d}"


def minutes_of_day(clock: str) -> int:
    hour, minute = clock.split(":")
    return int(hour) * 60 + int(minute)


def weekday_number(d: date) -> int:
    """1 = Monday ... 7 = Sunday."""
    return d.isoweekday()


def month_offset(year: int, month: int) -> int:
    """Blank cells before the 1st in a Monday-first month grid."""
    return date(year, month, 1).weekday()


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def week_dates(today: date) -> list[date]:
    """Monday..Sunday of the week containing ``today``."""
    monday = today - timedelta(days=today.weekday())
    return [monday + timedelta(days=i) for i in range(7)]
