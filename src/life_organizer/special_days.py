"""Countdowns and anniversaries."""
from datetime import date

from life_organizer.dates import day_difference, iso_date, parse_date
from life_organizer.db import ItemNotFound, get_connection
from life_organizer.models import SpecialDay

KINDS = ("COUNTDOWN", "ANNIVERSARY")


def _special(row) -> SpecialDay:
    return SpecialDay(id=row["id"], title=row["title"], date=row["day_date"], kind=row["kind"])


def _check(title: str, kind: str) -> None:
    if not title.strip():
        raise ValueError("Title is required")
    if kind not in KINDS:
        raise ValueError(f"Kind must be one of {', '.join(KINDS)}")


def get_special_days(db_path: str) -> list[SpecialDay]:
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM special_days ORDER BY id").fetchall()
    conn.close()
    return [_special(r) for r in rows]


def get_special_days_on(db_path: str, day) -> list[SpecialDay]:
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT * FROM special_days WHERE day_date = ? ORDER BY id", (iso_date(parse_date(day)),)
    ).fetchall()
    conn.close()
    return [_special(r) for r in rows]


def add_special_day(db_path: str, title: str, day, kind: str = "COUNTDOWN") -> SpecialDay:
    _check(title, kind)
    conn = get_connection(db_path)
    cur = conn.execute(
        "INSERT INTO special_days (title, day_date, kind) VALUES (?, ?, ?)",
        (title.strip(), iso_date(parse_date(day)), kind),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM special_days WHERE id = ?", (cur.lastrowid,)).fetchone()
    conn.close()
    return _special(row)


def update_special_day(db_path: str, special_id: int, title: str, day, kind: str) -> SpecialDay:
    _check(title, kind)
    conn = get_connection(db_path)
    conn.execute(
        "UPDATE special_days SET title = ?, day_date = ?, kind = ? WHERE id = ?",
        (title.strip(), iso_date(parse_date(day)), kind, special_id),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM special_days WHERE id = ?", (special_id,)).fetchone()
    conn.close()
    if not row:
        raise ItemNotFound(f"No special day with id {special_id}")
    return _special(row)


def delete_special_day(db_path: str, special_id: int) -> None:
    conn = get_connection(db_path)
    deleted = conn.execute("DELETE FROM special_days WHERE id = ?", (special_id,)).rowcount
    conn.commit()
    conn.close()
    if deleted == 0:
        raise ItemNotFound(f"No special day with id {special_id}")


def day_counter(special: SpecialDay, today: date = None) -> dict:
    """Days between today and the event, with the caption shown next to it."""
    today = today or date.today()
    event = parse_date(special.date)
    is_past = event < today
    if is_past:
        caption = "days since"
    elif special.kind == "ANNIVERSARY":
        caption = "days to anniversary"
    else:
        caption = "days left"
    return {"days": day_difference(today, event), "is_past": is_past, "caption": caption}
