"""Tests for the unified calendar."""
from datetime import date

from life_organizer.agenda import get_day_agenda, get_month_markers
from life_organizer.models import ClockRange, ScheduleSettings
from life_organizer.schedule import add_course, save_schedule_settings
from life_organizer.special_days import add_special_day
from life_organizer.todos import add_todo, toggle_complete


def test_month_markers(store):
    add_todo(store, "open", "2024-01-10")
    toggle_complete(store, add_todo(store, "done", "2024-01-11").id)
    add_special_day(store, "Exam", "2024-01-20")
    add_course(store, "Calculus", 1, 1, 2)  # Mondays

    markers = {m["date"]: m for m in get_month_markers(store, 2024, 1)}
    assert len(markers) == 31
    assert markers[date(2024, 1, 10)]["has_todo"] is True
    assert markers[date(2024, 1, 11)]["has_todo"] is False
    assert markers[date(2024, 1, 20)]["has_special"] is True
    assert markers[date(2024, 1, 1)]["has_course"] is True
    assert markers[date(2024, 1, 2)]["has_course"] is False


def test_day_agenda(store):
    save_schedule_settings(store, ScheduleSettings(specific_breaks={2: 20}))
    add_course(store, "Physics", 1, 3, 2)
    add_course(store, "Calculus", 1, 1, 2)
    add_todo(store, "Homework", "2024-01-01", time="14:00")
    add_special_day(store, "New year", "2024-01-01")

    agenda = get_day_agenda(store, "2024-01-01")
    assert [c.name for c, _ in agenda["courses"]] == ["Calculus", "Physics"]
    assert agenda["courses"][1][1] == ClockRange("10:00", "11:40")
    assert [t.text for t in agenda["todos"]] == ["Homework"]
    assert [s.title for s in agenda["specials"]] == ["New year"]


def test_empty_day(store):
    agenda = get_day_agenda(store, date(2024, 1, 2))
    assert agenda["courses"] == []
    assert agenda["todos"] == []
    assert agenda["specials"] == []
