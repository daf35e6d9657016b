"""Seed the store with default settings and sample entries."""
import json
from datetime import date, timedelta
from pathlib import Path

from life_organizer.db import get_connection
from life_organizer.models import ScheduleSettings
from life_organizer.notes import add_note
from life_organizer.period import save_cycle_settings
from life_organizer.schedule import add_course, save_schedule_settings
from life_organizer.special_days import add_special_day
from life_organizer.todos import add_todo, claim_reward, toggle_complete, toggle_star

CONTENT_DIR = Path(__file__).parent / "content"


def load_sample() -> dict:
    return json.loads((CONTENT_DIR / "sample.json").read_text(encoding="utf-8"))


def is_seeded(db_path: str) -> bool:
    """Check whether the schedule settings have been written yet."""
    conn = get_connection(db_path)
    count = conn.execute("SELECT COUNT(*) FROM schedule_settings").fetchone()[0]
    conn.close()
    return count > 0


def seed_settings(db_path: str, data: dict) -> None:
    """Day layout and cycle defaults."""
    schedule = dict(data["schedule"])
    # JSON object keys are strings
    schedule["specific_breaks"] = {int(k): v for k, v in schedule["specific_breaks"].items()}
    save_schedule_settings(db_path, ScheduleSettings(**schedule))
    cycle = data["cycle"]
    save_cycle_settings(db_path, cycle["last_period_start"], cycle["cycle_length"], cycle["period_length"])


def seed_courses(db_path: str, data: dict) -> None:
    for course in data["courses"]:
        add_course(db_path, **course)


def seed_todos(db_path: str, data: dict, today: date = None) -> None:
    """Sample todos, dated relative to ``today``."""
    today = today or date.today()
    for item in data["todos"]:
        todo = add_todo(
            db_path, item["text"], today + timedelta(days=item["day_offset"]),
            time=item.get("time"), reward=item.get("reward"),
        )
        if item.get("starred"):
            toggle_star(db_path, todo.id)
        if item.get("completed"):
            toggle_complete(db_path, todo.id)
        if item.get("claimed"):
            claim_reward(db_path, todo.id)


def seed_notes_and_days(db_path: str, data: dict) -> None:
    for note in data["notes"]:
        add_note(db_path, note["content"], note["color"])
    for day in data["special_days"]:
        add_special_day(db_path, day["title"], day["date"], day["kind"])


def seed_all(db_path: str, today: date = None) -> None:
    """Run all seed functions in order."""
    if is_seeded(db_path):
        return
    data = load_sample()
    seed_settings(db_path, data)
    seed_courses(db_path, data)
    seed_todos(db_path, data, today)
    seed_notes_and_days(db_path, data)
