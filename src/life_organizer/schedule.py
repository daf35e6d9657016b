"""Class schedule: courses, period settings and custom breaks."""
from life_organizer.db import ItemNotFound, get_connection
from life_organizer.models import Course, ScheduleSettings

COURSE_COLORS = [
    "blue", "magenta", "purple", "yellow", "green",
    "dark_orange", "cyan", "slate_blue1", "red", "turquoise2",
]


def get_schedule_settings(db_path: str) -> ScheduleSettings:
    conn = get_connection(db_path)
    row = conn.execute("SELECT * FROM schedule_settings WHERE id = 1").fetchone()
    breaks = conn.execute("SELECT section, minutes FROM specific_breaks ORDER BY section").fetchall()
    conn.close()
    specific = {b["section"]: b["minutes"] for b in breaks}
    if not row:
        return ScheduleSettings(specific_breaks=specific)
    return ScheduleSettings(
        start_hour=row["start_hour"],
        start_minute=row["start_minute"],
        class_duration=row["class_duration"],
        break_duration=row["break_duration"],
        total_sections=row["total_sections"],
        specific_breaks=specific,
    )


def save_schedule_settings(db_path: str, settings: ScheduleSettings) -> None:
    """Replace the day layout and the full set of custom breaks."""
    conn = get_connection(db_path)
    conn.execute(
        """INSERT INTO schedule_settings
        (id, start_hour, start_minute, class_duration, break_duration, total_sections)
        VALUES (1, ?, ?, ?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET start_hour=excluded.start_hour,
            start_minute=excluded.start_minute, class_duration=excluded.class_duration,
            break_duration=excluded.break_duration, total_sections=excluded.total_sections""",
        (settings.start_hour, settings.start_minute, settings.class_duration,
         settings.break_duration, settings.total_sections),
    )
    conn.execute("DELETE FROM specific_breaks")
    conn.executemany(
        "INSERT INTO specific_breaks (section, minutes) VALUES (?, ?)",
        sorted(settings.specific_breaks.items()),
    )
    conn.commit()
    conn.close()


def set_specific_break(db_path: str, section: int, minutes: int) -> None:
    conn = get_connection(db_path)
    conn.execute(
        "INSERT INTO specific_breaks (section, minutes) VALUES (?, ?) ON CONFLICT(section) DO UPDATE SET minutes=?",
        (section, minutes, minutes),
    )
    conn.commit()
    conn.close()


def remove_specific_break(db_path: str, section: int) -> None:
    conn = get_connection(db_path)
    conn.execute("DELETE FROM specific_breaks WHERE section = ?", (section,))
    conn.commit()
    conn.close()


def _course(row) -> Course:
    return Course(
        id=row["id"],
        name=row["name"],
        day_of_week=row["day_of_week"],
        start_section=row["start_section"],
        section_count=row["section_count"],
        room=row["room"] or "",
        color=row["color"],
    )


def add_course(db_path: str, name: str, day_of_week: int, start_section: int,
               section_count: int = 1, room: str = "", color: str = None) -> Course:
    if not name.strip():
        raise ValueError("Course name is required")
    if color is None:
        color = COURSE_COLORS[len(get_courses(db_path)) % len(COURSE_COLORS)]
    conn = get_connection(db_path)
    cur = conn.execute(
        """INSERT INTO courses (name, day_of_week, start_section, section_count, room, color)
        VALUES (?, ?, ?, ?, ?, ?)""",
        (name.strip(), day_of_week, start_section, section_count, room, color),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM courses WHERE id = ?", (cur.lastrowid,)).fetchone()
    conn.close()
    return _course(row)


def update_course(db_path: str, course_id: int, **fields) -> Course:
    allowed = {"name", "day_of_week", "start_section", "section_count", "room", "color"}
    unknown = set(fields) - allowed
    if unknown:
        raise ValueError(f"Unknown course fields: {', '.join(sorted(unknown))}")
    if "name" in fields and not fields["name"].strip():
        raise ValueError("Course name is required")
    conn = get_connection(db_path)
    if fields:
        assignments = ", ".join(f"{name} = ?" for name in fields)
        conn.execute(
            f"UPDATE courses SET {assignments} WHERE id = ?",
            (*fields.values(), course_id),
        )
        conn.commit()
    row = conn.execute("SELECT * FROM courses WHERE id = ?", (course_id,)).fetchone()
    conn.close()
    if not row:
        raise ItemNotFound(f"No course with id {course_id}")
    return _course(row)


def delete_course(db_path: str, course_id: int) -> None:
    conn = get_connection(db_path)
    deleted = conn.execute("DELETE FROM courses WHERE id = ?", (course_id,)).rowcount
    conn.commit()
    conn.close()
    if deleted == 0:
        raise ItemNotFound(f"No course with id {course_id}")


def get_courses(db_path: str) -> list[Course]:
    conn = get_connection(db_path)
    rows = conn.execute("SELECT * FROM courses ORDER BY day_of_week, start_section").fetchall()
    conn.close()
    return [_course(r) for r in rows]


def get_courses_for_day(db_path: str, day_of_week: int) -> list[Course]:
    """Courses held on a weekday (1=Mon..7=Sun), earliest section first."""
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT * FROM courses WHERE day_of_week = ? ORDER BY start_section",
        (day_of_week,),
    ).fetchall()
    conn.close()
    return [_course(r) for r in rows]


def get_course_at(db_path: str, day_of_week: int, section: int) -> Course | None:
    """The course occupying a grid cell, if any."""
    for course in get_courses_for_day(db_path, day_of_week):
        if course.start_section <= section < course.start_section + course.section_count:
            return course
    return None
