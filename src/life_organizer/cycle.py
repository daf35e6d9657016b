"""Menstrual cycle phase resolution.

Every date is placed in a cycle relative to the most recent recorded period
start (the anchor). Dates before the anchor fall into earlier cycles and dates
far after it wrap around into later ones, so ``day_of_cycle`` is always in
``[1, cycle_length]``.

The fertile window is the calendar heuristic: ovulation 14 days before the
next period, window from 5 days before to 4 days after. Short cycles (under
14 days) push the window outside the cycle and it simply never matches.
"""
from datetime import date, timedelta

from life_organizer.dates import parse_date
from life_organizer.models import PeriodData, Phase, PhaseInfo

LUTEAL_DAYS = 14
FERTILE_BEFORE = 5
FERTILE_AFTER = 4

# label, text color, indicator color
PHASE_STYLES = {
    Phase.MENSTRUAL: ("Period", "deep_pink3", "pink1"),
    Phase.OVULATION_DAY: ("Ovulation day", "purple", "medium_purple1"),
    Phase.OVULATION: ("Fertile window", "medium_purple", "plum2"),
    Phase.SAFE: ("Safe", "green", "pale_green1"),
}


def ovulation_day(data: PeriodData) -> int:
    return data.cycle_length - LUTEAL_DAYS


def fertile_window(data: PeriodData) -> tuple[int, int]:
    """First and last cycle day of the fertile window (not clamped)."""
    day = ovulation_day(data)
    return day - FERTILE_BEFORE, day + FERTILE_AFTER


def cycle_start_for(target: date, data: PeriodData) -> date:
    """Start date of the cycle that contains ``target``."""
    anchor = data.last_period_start
    diff_days = (target - anchor).days
    cycle_index = diff_days // data.cycle_length
    return anchor + timedelta(days=cycle_index * data.cycle_length)


def classify(day_of_cycle: int, data: PeriodData) -> Phase:
    if 1 <= day_of_cycle <= data.period_length:
        return Phase.MENSTRUAL
    ovulation = ovulation_day(data)
    if day_of_cycle == ovulation:
        return Phase.OVULATION_DAY
    first, last = fertile_window(data)
    if first <= day_of_cycle <= last:
        return Phase.OVULATION
    return Phase.SAFE


def resolve_phase(target, data: PeriodData) -> PhaseInfo:
    """Classify ``target`` (date, datetime or ISO string) within the cycle."""
    target = parse_date(target)
    day_of_cycle = (target - cycle_start_for(target, data)).days + 1
    phase = classify(day_of_cycle, data)
    label, color, indicator = PHASE_STYLES[phase]
    return PhaseInfo(
        phase=phase,
        day_of_cycle=day_of_cycle,
        label=label,
        color=color,
        indicator_color=indicator,
    )


def forecast(start, data: PeriodData, days: int = 7) -> list[tuple[date, PhaseInfo]]:
    start = parse_date(start)
    return [
        (start + timedelta(days=i), resolve_phase(start + timedelta(days=i), data))
        for i in range(days)
    ]


def next_period_start(today, data: PeriodData) -> date:
    """First cycle start strictly after ``today``."""
    today = parse_date(today)
    return cycle_start_for(today, data) + timedelta(days=data.cycle_length)
