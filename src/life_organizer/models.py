"""Data classes for the organizer domain model."""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


@dataclass
class ScheduleSettings:
    start_hour: int = 8
    start_minute: int = 0
    class_duration: int = 45
    break_duration: int = 10
    total_sections: int = 12
    # section number -> break minutes after that section
    specific_breaks: dict[int, int] = field(default_factory=dict)


@dataclass
class Course:
    id: int
    name: str
    day_of_week: int  # 1 = Monday, 7 = Sunday
    start_section: int
    section_count: int = 1
    room: str = ""
    color: str = "blue"


@dataclass
class PeriodLog:
    date: date
    flow: Optional[int] = None  # 1 light, 2 medium, 3 heavy
    mood: Optional[str] = None
    symptoms: list[str] = field(default_factory=list)


@dataclass
class PeriodData:
    last_period_start: date
    cycle_length: int = 28
    period_length: int = 5
    previous_period_start: Optional[date] = None
    logs: list[PeriodLog] = field(default_factory=list)


@dataclass
class TodoItem:
    id: int
    text: str
    date: str
    completed: bool = False
    time: Optional[str] = None
    reward: Optional[str] = None
    reward_claimed: bool = False
    points: Optional[int] = None
    is_starred: bool = False


@dataclass
class NoteItem:
    id: int
    content: str
    date: str
    color: str = "yellow"


@dataclass
class SpecialDay:
    id: int
    title: str
    date: str
    kind: str = "COUNTDOWN"  # COUNTDOWN or ANNIVERSARY


@dataclass(frozen=True)
class ClockRange:
    start: str
    end: str


class Phase(str, Enum):
    MENSTRUAL = "MENSTRUAL"
    OVULATION_DAY = "OVULATION_DAY"
    OVULATION = "OVULATION"
    SAFE = "SAFE"


@dataclass(frozen=True)
class PhaseInfo:
    phase: Phase
    day_of_cycle: int
    label: str
    color: str
    indicator_color: str
