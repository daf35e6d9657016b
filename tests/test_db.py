"""Tests for store initialization and connection management."""
from life_organizer.db import get_connection, init_db, open_store


def test_init_db_creates_tables(tmp_db):
    init_db(tmp_db)
    conn = get_connection(tmp_db)
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
    )
    tables = {row[0] for row in cursor.fetchall()}
    expected = {
        "user_settings", "schedule_settings", "specific_breaks", "courses",
        "period_data", "period_logs", "todos", "notes", "special_days",
    }
    assert expected.issubset(tables)
    conn.close()


def test_init_db_is_idempotent(tmp_db):
    init_db(tmp_db)
    init_db(tmp_db)  # should not raise
    conn = get_connection(tmp_db)
    cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
    assert len(cursor.fetchall()) > 0
    conn.close()


def test_get_connection_returns_row_factory(tmp_db):
    init_db(tmp_db)
    conn = get_connection(tmp_db)
    conn.execute("INSERT INTO user_settings (key, value) VALUES ('test', 'val')")
    row = conn.execute("SELECT key, value FROM user_settings WHERE key='test'").fetchone()
    assert row["key"] == "test"
    conn.close()


def test_in_memory_store_lives_while_anchor_is_open():
    db_path = "file:test_anchor?mode=memory&cache=shared"
    anchor = open_store(db_path)
    conn = get_connection(db_path)
    conn.execute("INSERT INTO user_settings (key, value) VALUES ('k', 'v')")
    conn.commit()
    conn.close()

    conn = get_connection(db_path)
    assert conn.execute("SELECT value FROM user_settings WHERE key = 'k'").fetchone()["value"] == "v"
    conn.close()
    anchor.close()

    # Last connection gone: the database starts empty again
    conn = get_connection(db_path)
    tables = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    conn.close()
    assert tables == []
