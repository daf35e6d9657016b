"""Cycle tracking state: anchor date, one-step undo and daily logs."""
import json
import logging
from datetime import date

from life_organizer.cycle import forecast, resolve_phase
from life_organizer.dates import iso_date, parse_date
from life_organizer.db import ItemNotFound, get_connection
from life_organizer.models import PeriodData, PeriodLog, PhaseInfo

logger = logging.getLogger("life_organizer.period")

FLOW_LABELS = {1: "Light", 2: "Medium", 3: "Heavy"}
MOODS = ["happy", "neutral", "sad", "angry", "tired"]
SYMPTOMS = ["cramps", "headache", "backache", "acne", "bloating", "insomnia"]


def _log(row) -> PeriodLog:
    return PeriodLog(
        date=date.fromisoformat(row["log_date"]),
        flow=row["flow"],
        mood=row["mood"],
        symptoms=json.loads(row["symptoms"] or "[]"),
    )


def get_logs(db_path: str) -> list[PeriodLog]:
    """All daily logs, most recent first."""
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM period_logs ORDER BY log_date DESC").fetchall()
    conn.close()
    return [_log(r) for r in rows]


def get_period_data(db_path: str) -> PeriodData:
    conn = get_connection(db_path)
    row = conn.execute("SELECT * FROM period_data WHERE id = 1").fetchone()
    conn.close()
    if not row:
        raise ItemNotFound("Cycle tracking has not been set up")
    previous = row["previous_period_start"]
    return PeriodData(
        last_period_start=date.fromisoformat(row["last_period_start"]),
        previous_period_start=date.fromisoformat(previous) if previous else None,
        cycle_length=row["cycle_length"],
        period_length=row["period_length"],
        logs=get_logs(db_path),
    )


def save_cycle_settings(db_path: str, last_period_start, cycle_length: int, period_length: int) -> None:
    """Overwrite the anchor and lengths. The undo slot is left untouched."""
    start = iso_date(parse_date(last_period_start))
    conn = get_connection(db_path)
    conn.execute(
        """INSERT INTO period_data (id, last_period_start, cycle_length, period_length)
        VALUES (1, ?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET last_period_start=excluded.last_period_start,
            cycle_length=excluded.cycle_length, period_length=excluded.period_length""",
        (start, cycle_length, period_length),
    )
    conn.commit()
    conn.close()


def mark_period_started(db_path: str, today: date = None) -> bool:
    """Move the anchor to ``today``, remembering the old one for undo.

    Returns False when the anchor already is today. Only the most recent
    anchor is remembered, so a second call overwrites the undo slot.
    """
    today = today or date.today()
    data = get_period_data(db_path)
    if data.last_period_start == today:
        return False
    conn = get_connection(db_path)
    conn.execute(
        "UPDATE period_data SET previous_period_start = ?, last_period_start = ? WHERE id = 1",
        (iso_date(data.last_period_start), iso_date(today)),
    )
    conn.commit()
    conn.close()
    logger.info("Cycle anchor moved from %s to %s", data.last_period_start, today)
    return True


def undo_period_start(db_path: str) -> bool:
    """Restore the previous anchor. Returns False when there is nothing to undo."""
    data = get_period_data(db_path)
    if data.previous_period_start is None:
        return False
    conn = get_connection(db_path)
    conn.execute(
        "UPDATE period_data SET last_period_start = ?, previous_period_start = NULL WHERE id = 1",
        (iso_date(data.previous_period_start),),
    )
    conn.commit()
    conn.close()
    logger.info("Cycle anchor restored to %s", data.previous_period_start)
    return True


def save_log(db_path: str, log_date=None, flow: int | None = None, mood: str | None = None,
             symptoms: list[str] | None = None) -> PeriodLog:
    """Save the log for a day, replacing any earlier log for the same date."""
    log_date = parse_date(log_date or date.today())
    if flow is not None and flow not in FLOW_LABELS:
        raise ValueError(f"Flow must be one of {sorted(FLOW_LABELS)}")
    symptoms = list(symptoms or [])
    conn = get_connection(db_path)
    conn.execute(
        """INSERT INTO period_logs (log_date, flow, mood, symptoms) VALUES (?, ?, ?, ?)
        ON CONFLICT(log_date) DO UPDATE SET flow=excluded.flow, mood=excluded.mood,
            symptoms=excluded.symptoms""",
        (iso_date(log_date), flow, mood, json.dumps(symptoms)),
    )
    conn.commit()
    conn.close()
    return PeriodLog(date=log_date, flow=flow, mood=mood, symptoms=symptoms)


def delete_log(db_path: str, log_date) -> None:
    conn = get_connection(db_path)
    deleted = conn.execute(
        "DELETE FROM period_logs WHERE log_date = ?", (iso_date(parse_date(log_date)),)
    ).rowcount
    conn.commit()
    conn.close()
    if deleted == 0:
        raise ItemNotFound(f"No log for {log_date}")


def get_phase_for(db_path: str, day: date = None) -> PhaseInfo:
    return resolve_phase(day or date.today(), get_period_data(db_path))


def get_week_strip(db_path: str, today: date = None) -> list[tuple[date, PhaseInfo]]:
    """Phase of today and the six days after it."""
    return forecast(today or date.today(), get_period_data(db_path), days=7)
