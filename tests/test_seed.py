from datetime import date

from life_organizer.db import get_connection, init_db
from life_organizer.notes import get_notes
from life_organizer.period import get_period_data
from life_organizer.schedule import get_courses, get_schedule_settings
from life_organizer.seed import is_seeded, load_sample, seed_all, seed_settings, seed_todos
from life_organizer.special_days import get_special_days
from life_organizer.todos import get_todos_for_date


def test_load_sample_has_every_section():
    data = load_sample()
    for key in ("schedule", "cycle", "courses", "todos", "notes", "special_days"):
        assert key in data


def test_seed_settings_converts_break_keys(tmp_db):
    init_db(tmp_db)
    seed_settings(tmp_db, load_sample())
    settings = get_schedule_settings(tmp_db)
    assert settings.specific_breaks == {2: 20, 4: 120}
    assert get_period_data(tmp_db).last_period_start == date(2023, 10, 1)


def test_seed_todos_relative_to_today(tmp_db):
    init_db(tmp_db)
    today = date(2024, 3, 10)
    seed_todos(tmp_db, load_sample(), today)
    todays = get_todos_for_date(tmp_db, today)
    assert len(todays) == 3
    assert todays[0].text == "Finish biology homework"  # starred first
    assert todays[-1].completed is True
    assert len(get_todos_for_date(tmp_db, date(2024, 3, 11))) == 1


def test_is_seeded(tmp_db):
    init_db(tmp_db)
    assert is_seeded(tmp_db) is False
    seed_all(tmp_db, today=date(2024, 3, 10))
    assert is_seeded(tmp_db) is True


def test_seed_all(tmp_db):
    init_db(tmp_db)
    seed_all(tmp_db, today=date(2024, 3, 10))
    assert len(get_courses(tmp_db)) == 4
    assert len(get_notes(tmp_db)) == 2
    assert len(get_special_days(tmp_db)) == 2


def test_seed_all_idempotent(tmp_db):
    init_db(tmp_db)
    seed_all(tmp_db, today=date(2024, 3, 10))
    seed_all(tmp_db, today=date(2024, 3, 10))
    conn = get_connection(tmp_db)
    assert conn.execute("SELECT COUNT(*) FROM courses").fetchone()[0] == 4
    assert conn.execute("SELECT COUNT(*) FROM todos").fetchone()[0] == 4
    conn.close()
