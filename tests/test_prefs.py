"""Tests for user preferences."""
from life_organizer.prefs import (
    get_log_level, get_notification_permission, get_poll_interval, get_setting,
    set_notification_permission, set_setting,
)


def test_get_setting_default(store):
    assert get_setting(store, "missing", "x") == "x"
    assert get_setting(store, "missing") is None


def test_set_setting_overwrites(store):
    set_setting(store, "theme", "light")
    set_setting(store, "theme", "dark")
    assert get_setting(store, "theme") == "dark"


def test_notification_permission_flow(store):
    assert get_notification_permission(store) == "default"
    set_notification_permission(store, True)
    assert get_notification_permission(store) == "granted"
    set_notification_permission(store, False)
    assert get_notification_permission(store) == "denied"


def test_poll_interval_and_log_level_defaults(store):
    assert get_poll_interval(store) == 10
    assert get_log_level(store) == "WARNING"
    set_setting(store, "poll_interval", "5")
    set_setting(store, "log_level", "debug")
    assert get_poll_interval(store) == 5
    assert get_log_level(store) == "DEBUG"
