from datetime import date

import pytest

from life_organizer.db import init_db
from life_organizer.models import PeriodData, ScheduleSettings


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_organizer.db")
    return db_path


@pytest.fixture
def store(tmp_db):
    """An initialized, empty store."""
    init_db(tmp_db)
    return tmp_db


@pytest.fixture
def settings():
    return ScheduleSettings(
        start_hour=8, start_minute=0, class_duration=45, break_duration=10,
        total_sections=12, specific_breaks={2: 20},
    )


@pytest.fixture
def cycle_data():
    return PeriodData(last_period_start=date(2023, 10, 1), cycle_length=28, period_length=5)
