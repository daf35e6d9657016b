"""Unified calendar: month markers and the agenda of a single day."""
from life_organizer.dates import days_in_month, iso_date, parse_date, weekday_number
from life_organizer.db import get_connection
from life_organizer.schedule import get_courses, get_courses_for_day, get_schedule_settings
from life_organizer.special_days import get_special_days_on
from life_organizer.timetable import course_time_range
from life_organizer.todos import get_todos_for_date


def get_month_markers(db_path: str, year: int, month: int) -> list[dict]:
    """One entry per day of the month with the dots the calendar grid shows."""
    days = days_in_month(year, month)
    first, last = iso_date(days[0]), iso_date(days[-1])
    conn = get_connection(db_path)
    open_todo_dates = {
        r["todo_date"] for r in conn.execute(
            "SELECT DISTINCT todo_date FROM todos WHERE completed = 0 AND todo_date BETWEEN ? AND ?",
            (first, last),
        ).fetchall()
    }
    special_dates = {
        r["day_date"] for r in conn.execute(
            "SELECT DISTINCT day_date FROM special_days WHERE day_date BETWEEN ? AND ?",
            (first, last),
        ).fetchall()
    }
    conn.close()
    course_weekdays = {c.day_of_week for c in get_courses(db_path)}
    return [
        {
            "date": d,
            "has_todo": iso_date(d) in open_todo_dates,
            "has_special": iso_date(d) in special_dates,
            "has_course": weekday_number(d) in course_weekdays,
        }
        for d in days
    ]


def get_day_agenda(db_path: str, day) -> dict:
    """Todos, classes with their times, and special days for one date."""
    day = parse_date(day)
    settings = get_schedule_settings(db_path)
    courses = [
        (course, course_time_range(course, settings))
        for course in get_courses_for_day(db_path, weekday_number(day))
    ]
    return {
        "date": day,
        "todos": get_todos_for_date(db_path, day),
        "courses": courses,
        "specials": get_special_days_on(db_path, day),
    }
