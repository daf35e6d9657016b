"""Class period to wall-clock time resolution."""
from life_organizer.dates import format_clock
from life_organizer.models import ClockRange, Course, ScheduleSettings


def effective_break(settings: ScheduleSettings, period_index: int) -> int:
    """Minutes of break after ``period_index``.

    A configured override wins even when it is zero; otherwise the default
    ``break_duration`` applies.
    """
    override = settings.specific_breaks.get(period_index)
    if override is not None:
        return override
    return settings.break_duration


def _to_clock(total_minutes: int) -> str:
    return format_clock(total_minutes // 60, total_minutes % 60)


def section_time_range(period_index: int, period_span: int, settings: ScheduleSettings) -> ClockRange:
    """Start and end time of a block of ``period_span`` periods starting at ``period_index``.

    Args:
        period_index: 1-based section number where the block starts.
        period_span: Number of consecutive sections in the block.
        settings: Day start, period length and break configuration.

    Returns:
        ClockRange with ``HH:MM`` strings. Hours wrap at midnight.
    """
    minutes = settings.start_hour * 60 + settings.start_minute
    for i in range(1, period_index):
        minutes += settings.class_duration
        minutes += effective_break(settings, i)
    start = minutes

    for offset in range(period_span):
        minutes += settings.class_duration
        # Breaks inside the block still count, the last one does not
        if offset < period_span - 1:
            minutes += effective_break(settings, period_index + offset)

    return ClockRange(start=_to_clock(start), end=_to_clock(minutes))


def course_time_range(course: Course, settings: ScheduleSettings) -> ClockRange:
    return section_time_range(course.start_section, course.section_count, settings)


def section_table(settings: ScheduleSettings) -> list[tuple[int, ClockRange]]:
    """Time range of every single section in the day, for the grid header."""
    return [
        (section, section_time_range(section, 1, settings))
        for section in range(1, settings.total_sections + 1)
    ]
