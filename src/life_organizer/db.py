"""In-memory store initialization and connection management."""
import sqlite3
from pathlib import Path

# Shared-cache in-memory database: lives while at least one connection is open.
DEFAULT_DB_PATH = "file:life_organizer?mode=memory&cache=shared"

SCHEMA = """
CREATE TABLE IF NOT EXISTS user_settings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    key TEXT NOT NULL UNIQUE,
    value TEXT
);

CREATE TABLE IF NOT EXISTS schedule_settings (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    start_hour INTEGER NOT NULL,
    start_minute INTEGER NOT NULL,
    class_duration INTEGER NOT NULL,
    break_duration INTEGER NOT NULL,
    total_sections INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS specific_breaks (
    section INTEGER PRIMARY KEY,
    minutes INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS courses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    day_of_week INTEGER NOT NULL,
    start_section INTEGER NOT NULL,
    section_count INTEGER NOT NULL DEFAULT 1,
    room TEXT DEFAULT '',
    color TEXT DEFAULT 'blue'
);

CREATE TABLE IF NOT EXISTS period_data (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    last_period_start TEXT NOT NULL,
    previous_period_start TEXT,
    cycle_length INTEGER NOT NULL,
    period_length INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS period_logs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    log_date TEXT NOT NULL UNIQUE,
    flow INTEGER,
    mood TEXT,
    symptoms TEXT DEFAULT '[]'
);

CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    text TEXT NOT NULL,
    todo_date TEXT NOT NULL,
    todo_time TEXT,
    completed INTEGER DEFAULT 0,
    reward TEXT,
    reward_claimed INTEGER DEFAULT 0,
    points INTEGER,
    is_starred INTEGER DEFAULT 0
);

CREATE TABLE IF NOT EXISTS notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    content TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    color TEXT DEFAULT 'yellow'
);

CREATE TABLE IF NOT EXISTS special_days (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    day_date TEXT NOT NULL,
    kind TEXT NOT NULL DEFAULT 'COUNTDOWN'
);
"""


class ItemNotFound(LookupError):
    """Raised when an id does not match any stored row."""


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Return a SQLite connection with row factory enabled."""
    conn = sqlite3.connect(db_path, uri=True)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str = DEFAULT_DB_PATH) -> None:
    """Initialize the store, creating all tables if they don't exist."""
    if not db_path.startswith("file:"):
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()


def open_store(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Initialize the store and return the connection that keeps it alive.

    An in-memory database is discarded once its last connection closes, so the
    caller holds the returned connection for the whole session.
    """
    anchor = get_connection(db_path)
    init_db(db_path)
    return anchor
