"""Todo list with rewards, stars and history."""
from datetime import date, timedelta

from life_organizer.dates import iso_date, parse_date
from life_organizer.db import ItemNotFound, get_connection
from life_organizer.models import TodoItem

REWARD_PRESETS = ["10 points", "Ice cream", "Watch an episode", "Nice dinner", "Nap"]


def _todo(row) -> TodoItem:
    return TodoItem(
        id=row["id"],
        text=row["text"],
        date=row["todo_date"],
        completed=bool(row["completed"]),
        time=row["todo_time"],
        reward=row["reward"],
        reward_claimed=bool(row["reward_claimed"]),
        points=row["points"],
        is_starred=bool(row["is_starred"]),
    )


def get_todo(db_path: str, todo_id: int) -> TodoItem:
    conn = get_connection(db_path)
    row = conn.execute("SELECT * FROM todos WHERE id = ?", (todo_id,)).fetchone()
    conn.close()
    if not row:
        raise ItemNotFound(f"No todo with id {todo_id}")
    return _todo(row)


def add_todo(db_path: str, text: str, todo_date=None, time: str | None = None,
             reward: str | None = None, points: int | None = None) -> TodoItem:
    if not text.strip():
        raise ValueError("Todo text is required")
    todo_date = iso_date(parse_date(todo_date or date.today()))
    conn = get_connection(db_path)
    cur = conn.execute(
        """INSERT INTO todos (text, todo_date, todo_time, reward, points)
        VALUES (?, ?, ?, ?, ?)""",
        (text, todo_date, time or None, (reward or "").strip() or None, points),
    )
    conn.commit()
    conn.close()
    return get_todo(db_path, cur.lastrowid)


def update_todo(db_path: str, todo_id: int, text: str, todo_date, time: str | None = None,
                reward: str | None = None) -> TodoItem:
    """Edit the text, date, time and reward. Completion and claim state are kept."""
    if not text.strip():
        raise ValueError("Todo text is required")
    get_todo(db_path, todo_id)
    conn = get_connection(db_path)
    conn.execute(
        "UPDATE todos SET text = ?, todo_date = ?, todo_time = ?, reward = ? WHERE id = ?",
        (text, iso_date(parse_date(todo_date)), time or None, (reward or "").strip() or None, todo_id),
    )
    conn.commit()
    conn.close()
    return get_todo(db_path, todo_id)


def _flip(db_path: str, todo_id: int, column: str) -> TodoItem:
    get_todo(db_path, todo_id)
    conn = get_connection(db_path)
    conn.execute(f"UPDATE todos SET {column} = 1 - {column} WHERE id = ?", (todo_id,))
    conn.commit()
    conn.close()
    return get_todo(db_path, todo_id)


def toggle_complete(db_path: str, todo_id: int) -> TodoItem:
    return _flip(db_path, todo_id, "completed")


def toggle_star(db_path: str, todo_id: int) -> TodoItem:
    return _flip(db_path, todo_id, "is_starred")


def claim_reward(db_path: str, todo_id: int) -> TodoItem:
    todo = get_todo(db_path, todo_id)
    if not todo.completed or not todo.reward:
        raise ValueError("Only completed todos with a reward can be claimed")
    conn = get_connection(db_path)
    conn.execute("UPDATE todos SET reward_claimed = 1 WHERE id = ?", (todo_id,))
    conn.commit()
    conn.close()
    return get_todo(db_path, todo_id)


def delete_todo(db_path: str, todo_id: int) -> None:
    conn = get_connection(db_path)
    deleted = conn.execute("DELETE FROM todos WHERE id = ?", (todo_id,)).rowcount
    conn.commit()
    conn.close()
    if deleted == 0:
        raise ItemNotFound(f"No todo with id {todo_id}")


def _sort_key(todo: TodoItem):
    # Open before done, starred first, timed before untimed, newest first
    return (
        todo.completed,
        not todo.is_starred,
        todo.time is None,
        todo.time or "",
        -todo.id,
    )


def get_todos_for_date(db_path: str, day=None) -> list[TodoItem]:
    day = iso_date(parse_date(day or date.today()))
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM todos WHERE todo_date = ?", (day,)).fetchall()
    conn.close()
    return sorted((_todo(r) for r in rows), key=_sort_key)


def get_day_stats(db_path: str, day=None) -> dict:
    todos = get_todos_for_date(db_path, day)
    return {
        "total": len(todos),
        "completed": sum(1 for t in todos if t.completed),
        "uncompleted": sum(1 for t in todos if not t.completed),
        "starred": sum(1 for t in todos if t.is_starred),
    }


def get_future_groups(db_path: str, today=None) -> list[tuple[str, list[TodoItem]]]:
    """Todos after ``today`` grouped by date, soonest first."""
    today = iso_date(parse_date(today or date.today()))
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT * FROM todos WHERE todo_date > ? ORDER BY todo_date, id DESC", (today,)
    ).fetchall()
    conn.close()
    groups: dict[str, list[TodoItem]] = {}
    for row in rows:
        groups.setdefault(row["todo_date"], []).append(_todo(row))
    return list(groups.items())


def get_history_groups(db_path: str, today=None) -> list[tuple[str, list[TodoItem]]]:
    """Completed todos grouped by date, most recent first.

    Today's and yesterday's groups are labelled ``Today`` and ``Yesterday``.
    """
    today = parse_date(today or date.today())
    labels = {iso_date(today): "Today", iso_date(today - timedelta(days=1)): "Yesterday"}
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT * FROM todos WHERE completed = 1 ORDER BY todo_date DESC, id DESC"
    ).fetchall()
    conn.close()
    groups: dict[str, list[TodoItem]] = {}
    for row in rows:
        key = labels.get(row["todo_date"], row["todo_date"])
        groups.setdefault(key, []).append(_todo(row))
    return list(groups.items())


def get_vault_items(db_path: str) -> list[TodoItem]:
    """Completed todos whose reward has not been claimed yet."""
    conn = get_connection(db_path)
    rows = conn.execute(
        """SELECT * FROM todos
        WHERE completed = 1 AND reward IS NOT NULL AND reward_claimed = 0
        ORDER BY todo_date DESC, id DESC"""
    ).fetchall()
    conn.close()
    return [_todo(r) for r in rows]
