"""Sticky notes."""
import random
from datetime import datetime

from life_organizer.db import ItemNotFound, get_connection
from life_organizer.models import NoteItem

NOTE_COLORS = ["yellow", "blue", "pink1", "green", "purple"]


def _note(row) -> NoteItem:
    return NoteItem(id=row["id"], content=row["content"], date=row["updated_at"], color=row["color"])


def get_notes(db_path: str) -> list[NoteItem]:
    """Notes, most recently edited first."""
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM notes ORDER BY updated_at DESC, id DESC").fetchall()
    conn.close()
    return [_note(r) for r in rows]


def add_note(db_path: str, content: str, color: str = None) -> NoteItem:
    if not content.strip():
        raise ValueError("Note is empty")
    color = color or random.choice(NOTE_COLORS)
    conn = get_connection(db_path)
    cur = conn.execute(
        "INSERT INTO notes (content, updated_at, color) VALUES (?, ?, ?)",
        (content, datetime.now().isoformat(timespec="microseconds"), color),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM notes WHERE id = ?", (cur.lastrowid,)).fetchone()
    conn.close()
    return _note(row)


def update_note(db_path: str, note_id: int, content: str) -> NoteItem:
    if not content.strip():
        raise ValueError("Note is empty")
    conn = get_connection(db_path)
    conn.execute(
        "UPDATE notes SET content = ?, updated_at = ? WHERE id = ?",
        (content, datetime.now().isoformat(timespec="microseconds"), note_id),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM notes WHERE id = ?", (note_id,)).fetchone()
    conn.close()
    if not row:
        raise ItemNotFound(f"No note with id {note_id}")
    return _note(row)


def delete_note(db_path: str, note_id: int) -> None:
    conn = get_connection(db_path)
    deleted = conn.execute("DELETE FROM notes WHERE id = ?", (note_id,)).rowcount
    conn.commit()
    conn.close()
    if deleted == 0:
        raise ItemNotFound(f"No note with id {note_id}")
