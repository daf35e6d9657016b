"""Reminder poller for upcoming classes and period days.

The poller wakes every few seconds but only does work when the wall-clock
minute has changed since the previous tick. Each reminder fires at most once
per logical event, tracked in a ledger keyed by ``(date, identifier)`` that is
pruned as days pass.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from life_organizer.cycle import resolve_phase
from life_organizer.dates import minutes_of_day, weekday_number
from life_organizer.db import ItemNotFound
from life_organizer.models import Phase
from life_organizer.period import get_period_data
from life_organizer.prefs import get_notification_permission
from life_organizer.schedule import get_courses_for_day, get_schedule_settings
from life_organizer.timetable import course_time_range

logger = logging.getLogger("life_organizer.notifier")

PERIOD_REMINDER_ID = "period-reminder"


@dataclass(frozen=True)
class Reminder:
    identifier: str
    title: str
    body: str


class NotifiedLedger:
    """Events already announced, remembered for a few days."""

    def __init__(self, retain_days: int = 2) -> None:
        self.retain_days = retain_days
        self._entries: set[tuple[date, str]] = set()

    def __contains__(self, key: tuple[date, str]) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def mark(self, day: date, identifier: str) -> None:
        self._entries.add((day, identifier))

    def prune(self, today: date) -> int:
        """Drop entries older than ``retain_days`` before ``today``."""
        cutoff = today - timedelta(days=self.retain_days)
        stale = {key for key in self._entries if key[0] < cutoff}
        self._entries -= stale
        return len(stale)


class ReminderPoller:
    """Checks the store once per minute and sends due reminders.

    Args:
        db_path: Store to read courses, schedule settings and cycle data from.
        send: Callable taking ``(title, body)`` that shows the notification.
        interval: Seconds between wake-ups of the background thread.
        lead_minutes: How long before a class starts to remind.
        tolerance: Minutes either side of ``lead_minutes`` that still count.
        retain_days: Days of ledger history kept after pruning.
    """

    def __init__(
        self,
        db_path: str,
        send: Callable[[str, str], None],
        interval: float = 10,
        lead_minutes: int = 30,
        tolerance: int = 1,
        retain_days: int = 2,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.db_path = db_path
        self.send = send
        self.interval = interval
        self.lead_minutes = lead_minutes
        self.tolerance = tolerance
        self.clock = clock
        self.ledger = NotifiedLedger(retain_days)
        self._last_minute: Optional[datetime] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _period_reminder(self, now: datetime) -> list[Reminder]:
        today = now.date()
        if (today, PERIOD_REMINDER_ID) in self.ledger:
            return []
        try:
            data = get_period_data(self.db_path)
        except ItemNotFound:
            return []
        info = resolve_phase(today, data)
        if info.phase != Phase.MENSTRUAL:
            return []
        self.ledger.mark(today, PERIOD_REMINDER_ID)
        return [Reminder(
            PERIOD_REMINDER_ID,
            "Gentle reminder",
            f"Day {info.day_of_cycle} of your period. Keep warm, drink something hot and take it easy.",
        )]

    def _class_reminders(self, now: datetime) -> list[Reminder]:
        today = now.date()
        settings = get_schedule_settings(self.db_path)
        now_minutes = now.hour * 60 + now.minute + now.second / 60
        due = []
        for course in get_courses_for_day(self.db_path, weekday_number(today)):
            identifier = f"class-{course.id}"
            if (today, identifier) in self.ledger:
                continue
            start = course_time_range(course, settings).start
            minutes_until = minutes_of_day(start) - now_minutes
            if abs(minutes_until - self.lead_minutes) <= self.tolerance:
                self.ledger.mark(today, identifier)
                room = course.room or "room unknown"
                due.append(Reminder(
                    identifier,
                    "Class reminder",
                    f"{course.name} starts at {start} in {self.lead_minutes} minutes ({room}).",
                ))
        return due

    def due_reminders(self, now: datetime) -> list[Reminder]:
        """Reminders that become due at ``now``; marks them as notified."""
        self.ledger.prune(now.date())
        return self._period_reminder(now) + self._class_reminders(now)

    def tick(self, now: datetime = None) -> list[Reminder]:
        """Run one poll. Does nothing if the minute has not changed."""
        now = now or self.clock()
        minute = now.replace(second=0, microsecond=0)
        if minute == self._last_minute:
            return []
        self._last_minute = minute

        reminders = self.due_reminders(now)
        if reminders and get_notification_permission(self.db_path) != "granted":
            logger.debug("Notifications not granted; suppressed %d reminders", len(reminders))
            return reminders
        for reminder in reminders:
            try:
                self.send(reminder.title, reminder.body)
            except Exception:
                logger.exception("Failed to send reminder %s", reminder.identifier)
        return reminders

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.tick()
            except Exception:
                logger.exception("Reminder poll failed")
            self._stop.wait(self.interval)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="reminder-poller", daemon=True)
        self._thread.start()
        logger.info("Reminder poller started (every %ss)", self.interval)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        logger.info("Reminder poller stopped")
