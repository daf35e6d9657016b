"""Tests for data model classes."""
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from life_organizer.models import (
    ClockRange, Course, NoteItem, PeriodData, PeriodLog, Phase, ScheduleSettings, SpecialDay, TodoItem,
)


def test_schedule_settings_defaults():
    s = ScheduleSettings()
    assert (s.start_hour, s.start_minute) == (8, 0)
    assert s.class_duration == 45
    assert s.break_duration == 10
    assert s.total_sections == 12
    assert s.specific_breaks == {}


def test_specific_breaks_not_shared():
    a = ScheduleSettings()
    b = ScheduleSettings()
    a.specific_breaks[2] = 20
    assert b.specific_breaks == {}


def test_course_defaults():
    c = Course(id=1, name="Calculus", day_of_week=1, start_section=1)
    assert c.section_count == 1
    assert c.room == ""
    assert c.color == "blue"


def test_period_data_defaults():
    p = PeriodData(last_period_start=date(2023, 10, 1))
    assert p.cycle_length == 28
    assert p.period_length == 5
    assert p.previous_period_start is None
    assert p.logs == []


def test_period_log_defaults():
    log = PeriodLog(date=date(2023, 10, 2))
    assert log.flow is None
    assert log.mood is None
    assert log.symptoms == []


def test_todo_defaults():
    t = TodoItem(id=1, text="Read", date="2024-01-01")
    assert t.completed is False
    assert t.time is None
    assert t.reward is None
    assert t.reward_claimed is False
    assert t.is_starred is False


def test_note_and_special_day_defaults():
    assert NoteItem(id=1, content="x", date="2024-01-01").color == "yellow"
    assert SpecialDay(id=1, title="Exam", date="2024-01-01").kind == "COUNTDOWN"


def test_clock_range_is_immutable():
    r = ClockRange("08:00", "08:45")
    with pytest.raises(FrozenInstanceError):
        r.start = "09:00"


def test_phase_values_are_strings():
    assert Phase.MENSTRUAL == "MENSTRUAL"
    assert Phase("SAFE") is Phase.SAFE
