"""Tests for cycle tracking state."""
from datetime import date

import pytest

from life_organizer.db import ItemNotFound
from life_organizer.models import Phase
from life_organizer.period import (
    delete_log, get_logs, get_period_data, get_phase_for, get_week_strip, mark_period_started,
    save_cycle_settings, save_log, undo_period_start,
)


@pytest.fixture
def tracked(store):
    save_cycle_settings(store, "2023-10-01", 28, 5)
    return store


def test_period_data_requires_setup(store):
    with pytest.raises(ItemNotFound):
        get_period_data(store)


def test_save_cycle_settings(tracked):
    data = get_period_data(tracked)
    assert data.last_period_start == date(2023, 10, 1)
    assert data.cycle_length == 28
    assert data.period_length == 5
    assert data.previous_period_start is None
    assert data.logs == []


def test_mark_period_started_keeps_undo_slot(tracked):
    assert mark_period_started(tracked, date(2023, 10, 27)) is True
    data = get_period_data(tracked)
    assert data.last_period_start == date(2023, 10, 27)
    assert data.previous_period_start == date(2023, 10, 1)


def test_mark_period_started_same_day_is_noop(tracked):
    mark_period_started(tracked, date(2023, 10, 27))
    assert mark_period_started(tracked, date(2023, 10, 27)) is False
    assert get_period_data(tracked).previous_period_start == date(2023, 10, 1)


def test_undo_restores_previous_anchor_once(tracked):
    mark_period_started(tracked, date(2023, 10, 27))
    assert undo_period_start(tracked) is True
    data = get_period_data(tracked)
    assert data.last_period_start == date(2023, 10, 1)
    assert data.previous_period_start is None
    assert undo_period_start(tracked) is False


def test_only_one_level_of_undo(tracked):
    mark_period_started(tracked, date(2023, 10, 27))
    mark_period_started(tracked, date(2023, 11, 24))
    undo_period_start(tracked)
    assert get_period_data(tracked).last_period_start == date(2023, 10, 27)
    assert undo_period_start(tracked) is False


def test_save_log_replaces_same_date(tracked):
    save_log(tracked, "2023-10-02", flow=2, mood="tired", symptoms=["cramps"])
    save_log(tracked, "2023-10-02", flow=3)
    logs = get_logs(tracked)
    assert len(logs) == 1
    assert logs[0].flow == 3
    assert logs[0].mood is None
    assert logs[0].symptoms == []


def test_logs_newest_first(tracked):
    save_log(tracked, "2023-10-02", flow=1)
    save_log(tracked, "2023-10-04", flow=2)
    assert [l.date for l in get_period_data(tracked).logs] == [date(2023, 10, 4), date(2023, 10, 2)]


def test_save_log_rejects_bad_flow(tracked):
    with pytest.raises(ValueError):
        save_log(tracked, "2023-10-02", flow=4)


def test_delete_log(tracked):
    save_log(tracked, "2023-10-02", flow=1)
    delete_log(tracked, "2023-10-02")
    assert get_logs(tracked) == []
    with pytest.raises(ItemNotFound):
        delete_log(tracked, "2023-10-02")


def test_phase_follows_moved_anchor(tracked):
    assert get_phase_for(tracked, date(2023, 10, 27)).phase == Phase.SAFE
    mark_period_started(tracked, date(2023, 10, 27))
    info = get_phase_for(tracked, date(2023, 10, 27))
    assert info.phase == Phase.MENSTRUAL
    assert info.day_of_cycle == 1


def test_week_strip(tracked):
    strip = get_week_strip(tracked, date(2023, 10, 1))
    assert len(strip) == 7
    assert [p.phase for _, p in strip[:5]] == [Phase.MENSTRUAL] * 5
