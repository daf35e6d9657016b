"""User preferences stored as key/value pairs."""
from life_organizer.db import get_connection

NOTIFICATIONS_KEY = "notifications"
POLL_INTERVAL_KEY = "poll_interval"
LOG_LEVEL_KEY = "log_level"

DEFAULT_POLL_INTERVAL = 10
DEFAULT_LOG_LEVEL = "WARNING"


def get_setting(db_path: str, key: str, default: str = None) -> str | None:
    conn = get_connection(db_path)
    row = conn.execute("SELECT value FROM user_settings WHERE key = ?", (key,)).fetchone()
    conn.close()
    return row["value"] if row else default


def set_setting(db_path: str, key: str, value: str) -> None:
    conn = get_connection(db_path)
    conn.execute(
        "INSERT INTO user_settings (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value=?",
        (key, value, value),
    )
    conn.commit()
    conn.close()


def get_notification_permission(db_path: str) -> str:
    """One of ``default``, ``granted`` or ``denied``."""
    return get_setting(db_path, NOTIFICATIONS_KEY, "default")


def set_notification_permission(db_path: str, granted: bool) -> None:
    set_setting(db_path, NOTIFICATIONS_KEY, "granted" if granted else "denied")


def get_poll_interval(db_path: str) -> int:
    return int(get_setting(db_path, POLL_INTERVAL_KEY, str(DEFAULT_POLL_INTERVAL)))


def get_log_level(db_path: str) -> str:
    return get_setting(db_path, LOG_LEVEL_KEY, DEFAULT_LOG_LEVEL).upper()
