"""Interactive CLI application."""
import logging
from datetime import date

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from life_organizer.agenda import get_day_agenda, get_month_markers
from life_organizer.cycle import fertile_window, next_period_start, resolve_phase
from life_organizer.dates import WEEKDAY_NAMES, month_offset, parse_date, shift_month, week_dates
from life_organizer.db import DEFAULT_DB_PATH, open_store
from life_organizer.notes import add_note, delete_note, get_notes, update_note
from life_organizer.notifier import ReminderPoller
from life_organizer.period import (
    FLOW_LABELS, MOODS, SYMPTOMS, get_period_data, get_week_strip, mark_period_started,
    save_cycle_settings, save_log, undo_period_start,
)
from life_organizer.prefs import (
    get_log_level, get_notification_permission, get_poll_interval, set_notification_permission,
)
from life_organizer.schedule import (
    add_course, delete_course, get_course_at, get_schedule_settings, remove_specific_break,
    save_schedule_settings, set_specific_break, update_course,
)
from life_organizer.seed import is_seeded, seed_all
from life_organizer.special_days import (
    add_special_day, day_counter, delete_special_day, get_special_days, update_special_day,
)
from life_organizer.timetable import section_table, section_time_range
from life_organizer.todos import (
    REWARD_PRESETS, add_todo, claim_reward, delete_todo, get_day_stats, get_future_groups,
    get_history_groups, get_todo, get_todos_for_date, get_vault_items, toggle_complete, toggle_star, update_todo,
)

console = Console()
logger = logging.getLogger("life_organizer.app")


class CommandCancelled(Exception):
    """Raised when the user types q or menu inside a command."""


def ask(prompt: str, **kwargs) -> str:
    """Prompt wrapper that treats q/menu as 'back to the main menu'."""
    if kwargs.get("default", "") is None:
        del kwargs["default"]
    answer = Prompt.ask(prompt, **kwargs)
    if answer is not None and answer.strip().lower() in ("q", "menu"):
        raise CommandCancelled()
    return answer


def ask_int(prompt: str, choices: list[str] | None = None, default: int | None = None) -> int:
    while True:
        answer = ask(prompt, choices=choices, default=None if default is None else str(default))
        try:
            return int(answer)
        except (TypeError, ValueError):
            console.print("[red]Please enter a number.[/red]")


def show_welcome():
    console.print(Panel(
        "[bold]Life Organizer[/bold]\n[dim]Todos, classes, calendar and cycle[/dim]",
        title="Welcome", border_style="magenta",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("todo", "Today's tasks and reward vault"),
        ("notes", "Sticky notes"),
        ("schedule", "Weekly class grid"),
        ("calendar", "Month calendar and day agenda"),
        ("special", "Cycle tracker, countdowns and anniversaries"),
        ("settings", "Class times, breaks and reminders"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<10}[/cyan] {desc}")


def show_notification(title: str, body: str) -> None:
    console.print(Panel(body, title=title, border_style="yellow"))


# --- Todos ---


def render_todos(db_path: str, today: date) -> None:
    stats = get_day_stats(db_path, today)
    table = Table(title=f"Today ({stats['completed']}/{stats['total']} done, {stats['starred']} starred)")
    table.add_column("#", justify="right")
    table.add_column("")
    table.add_column("Task")
    table.add_column("Time")
    table.add_column("Reward", style="yellow")
    for todo in get_todos_for_date(db_path, today):
        mark = "[green]✓[/green]" if todo.completed else ("[yellow]★[/yellow]" if todo.is_starred else "")
        text = f"[dim strike]{todo.text}[/dim strike]" if todo.completed else todo.text
        table.add_row(str(todo.id), mark, text, todo.time or "", todo.reward or "")
    console.print(table)
    vault = get_vault_items(db_path)
    if vault:
        console.print("[bold yellow]Reward vault:[/bold yellow] " + ", ".join(f"{t.id}) {t.reward}" for t in vault))


def _ask_todo_fields(default_text: str = None, default_date: str = None, default_time: str = None,
                     default_reward: str = None) -> tuple:
    text = ask("Task", default=default_text)
    todo_date = ask("Date (YYYY-MM-DD)", default=default_date or date.today().isoformat())
    time = ask("Time (HH:MM, blank for none)", default=default_time or "")
    console.print(f"[dim]Reward ideas: {', '.join(REWARD_PRESETS)}[/dim]")
    reward = ask("Reward (blank for none)", default=default_reward or "")
    return text, parse_date(todo_date), time, reward


def cmd_todo(db_path: str):
    today = date.today()
    while True:
        render_todos(db_path, today)
        action = ask(
            "\nAction", choices=["add", "done", "star", "edit", "delete", "claim", "future", "history", "back"],
            default="back",
        )
        if action == "back":
            return
        if action == "add":
            add_todo(db_path, *_ask_todo_fields())
        elif action == "future":
            for day, todos in get_future_groups(db_path, today):
                console.print(f"[bold]{day}[/bold]")
                for t in todos:
                    console.print(f"  {t.id}) {t.text}" + (f" [yellow]({t.reward})[/yellow]" if t.reward else ""))
        elif action == "history":
            for label, todos in get_history_groups(db_path, today):
                console.print(f"[bold]{label}[/bold]")
                for t in todos:
                    claimed = " [dim](claimed)[/dim]" if t.reward_claimed else ""
                    console.print(f"  [green]✓[/green] {t.text}{claimed}")
        else:
            todo_id = ask_int("Task #")
            if action == "done":
                toggle_complete(db_path, todo_id)
            elif action == "star":
                toggle_star(db_path, todo_id)
            elif action == "delete":
                delete_todo(db_path, todo_id)
            elif action == "claim":
                todo = claim_reward(db_path, todo_id)
                console.print(f"[yellow]Enjoy your reward: {todo.reward}![/yellow]")
            elif action == "edit":
                current = get_todo(db_path, todo_id)
                fields = _ask_todo_fields(current.text, current.date, current.time, current.reward)
                update_todo(db_path, todo_id, *fields)


# --- Notes ---


def cmd_notes(db_path: str):
    while True:
        for note in get_notes(db_path):
            console.print(Panel(note.content, title=f"#{note.id}", subtitle=note.date[:16], border_style=note.color))
        action = ask("\nAction", choices=["add", "edit", "delete", "back"], default="back")
        if action == "back":
            return
        if action == "add":
            add_note(db_path, ask("Note"))
        elif action == "edit":
            note_id = ask_int("Note #")
            update_note(db_path, note_id, ask("New text"))
        elif action == "delete":
            delete_note(db_path, ask_int("Note #"))


# --- Schedule ---


def render_week_grid(db_path: str) -> None:
    settings = get_schedule_settings(db_path)
    today = date.today()
    table = Table(title="My Classes", show_lines=True)
    table.add_column("Section", justify="right", style="dim")
    for name, day in zip(WEEKDAY_NAMES, week_dates(today)):
        style = "bold magenta" if day == today else ""
        table.add_column(f"{name}\n{day.month}/{day.day}", style=style)
    for section, clock in section_table(settings):
        cells = []
        for weekday in range(1, 8):
            course = get_course_at(db_path, weekday, section)
            if course is None:
                cells.append("")
            elif course.start_section == section:
                rng = section_time_range(course.start_section, course.section_count, settings)
                cells.append(f"[{course.color}]{course.name}[/{course.color}]\n{course.room}\n{rng.start}-{rng.end}")
            else:
                cells.append(f"[{course.color}]│[/{course.color}]")
        table.add_row(f"{section}\n{clock.start}", *cells)
    console.print(table)


def cmd_schedule(db_path: str):
    while True:
        render_week_grid(db_path)
        action = ask("\nAction", choices=["add", "edit", "delete", "back"], default="back")
        if action == "back":
            return
        settings = get_schedule_settings(db_path)
        sections = [str(i) for i in range(1, settings.total_sections + 1)]
        if action == "add":
            name = ask("Course name")
            weekday = ask_int("Day (1=Mon .. 7=Sun)", choices=[str(i) for i in range(1, 8)])
            start = ask_int("Start section", choices=sections)
            count = ask_int("Number of sections", default=1)
            room = ask("Room", default="")
            add_course(db_path, name, weekday, start, count, room)
        else:
            weekday = ask_int("Day (1=Mon .. 7=Sun)", choices=[str(i) for i in range(1, 8)])
            section = ask_int("Section", choices=sections)
            course = get_course_at(db_path, weekday, section)
            if course is None:
                console.print("[yellow]No class in that slot.[/yellow]")
                continue
            if action == "delete":
                delete_course(db_path, course.id)
            else:
                update_course(
                    db_path, course.id,
                    name=ask("Course name", default=course.name),
                    room=ask("Room", default=course.room),
                    start_section=ask_int("Start section", choices=sections, default=course.start_section),
                    section_count=ask_int("Number of sections", default=course.section_count),
                )


# --- Calendar ---


def render_month(db_path: str, year: int, month: int, selected: date) -> None:
    table = Table(title=f"{year}-{month:02d}")
    for name in WEEKDAY_NAMES:
        table.add_column(name, justify="center")
    cells = [""] * month_offset(year, month)
    for marker in get_month_markers(db_path, year, month):
        d = marker["date"]
        dots = ("[blue]•[/blue]" if marker["has_todo"] else "") \
            + ("[magenta]♥[/magenta]" if marker["has_special"] else "") \
            + ("[green]•[/green]" if marker["has_course"] else "")
        label = f"[reverse]{d.day}[/reverse]" if d == selected else str(d.day)
        cells.append(f"{label}\n{dots}")
    while len(cells) % 7:
        cells.append("")
    for i in range(0, len(cells), 7):
        table.add_row(*cells[i:i + 7])
    console.print(table)


def render_agenda(db_path: str, day: date) -> None:
    agenda = get_day_agenda(db_path, day)
    console.print(f"\n[bold]{day.isoformat()} {WEEKDAY_NAMES[day.weekday()]}[/bold]")
    for special in agenda["specials"]:
        console.print(f"  [magenta]♥ {special.title}[/magenta]")
    for course, rng in agenda["courses"]:
        console.print(f"  [green]{rng.start}-{rng.end}[/green] {course.name} [dim]{course.room}[/dim]")
    for todo in agenda["todos"]:
        check = "[green]✓[/green]" if todo.completed else "○"
        console.print(f"  {check} {todo.text}" + (f" [dim]{todo.time}[/dim]" if todo.time else ""))
    if not any(agenda[k] for k in ("specials", "courses", "todos")):
        console.print("  [dim]Nothing planned.[/dim]")


def cmd_calendar(db_path: str):
    selected = date.today()
    year, month = selected.year, selected.month
    while True:
        render_month(db_path, year, month, selected)
        render_agenda(db_path, selected)
        action = ask("\nAction", choices=["prev", "next", "day", "back"], default="back")
        if action == "back":
            return
        if action in ("prev", "next"):
            year, month = shift_month(year, month, -1 if action == "prev" else 1)
        else:
            selected = date(year, month, ask_int("Day of month"))


# --- Cycle and special days ---


def render_cycle(db_path: str, today: date) -> None:
    data = get_period_data(db_path)
    info = resolve_phase(today, data)
    first, last = fertile_window(data)
    console.print(Panel(
        f"[bold {info.color}]{info.label}[/bold {info.color}]  day {info.day_of_cycle} of {data.cycle_length}\n"
        f"Next period: {next_period_start(today, data).isoformat()}   "
        f"Fertile window: cycle days {first}-{last}",
        title="Cycle", border_style=info.color,
    ))
    strip = Table.grid(padding=(0, 2))
    days = get_week_strip(db_path, today)
    for _ in days:
        strip.add_column(justify="center")
    strip.add_row(*["Today" if d == today else WEEKDAY_NAMES[d.weekday()] for d, _ in days])
    strip.add_row(*[f"[{p.indicator_color}]●[/{p.indicator_color}] {d.day}" for d, p in days])
    console.print(strip)
    for log in data.logs[:5]:
        flow = FLOW_LABELS.get(log.flow, "")
        console.print(f"  [dim]{log.date.isoformat()}[/dim] {flow} {log.mood or ''} {', '.join(log.symptoms)}")


def render_special_days(db_path: str, today: date) -> None:
    table = Table(title="Countdowns & anniversaries")
    table.add_column("#", justify="right")
    table.add_column("Event")
    table.add_column("Date")
    table.add_column("Days", justify="right")
    for special in get_special_days(db_path):
        counter = day_counter(special, today)
        color = "magenta" if special.kind == "ANNIVERSARY" else "blue"
        table.add_row(str(special.id), f"[{color}]{special.title}[/{color}]", special.date,
                      f"{counter['days']} {counter['caption']}")
    console.print(table)


def _ask_log() -> dict:
    flow = ask("Flow (1=light, 2=medium, 3=heavy, blank for none)", default="")
    mood = ask("Mood", choices=MOODS, default="")
    symptoms = ask(f"Symptoms, comma separated ({', '.join(SYMPTOMS)})", default="")
    return {
        "flow": int(flow) if flow else None,
        "mood": mood or None,
        "symptoms": [s.strip() for s in symptoms.split(",") if s.strip()],
    }


def cmd_special(db_path: str):
    today = date.today()
    while True:
        render_cycle(db_path, today)
        render_special_days(db_path, today)
        action = ask(
            "\nAction", choices=["started", "undo", "log", "cycle", "add", "edit", "delete", "back"],
            default="back",
        )
        if action == "back":
            return
        if action == "started":
            if not mark_period_started(db_path, today):
                console.print("[dim]Already recorded for today.[/dim]")
        elif action == "undo":
            if not undo_period_start(db_path):
                console.print("[dim]Nothing to undo.[/dim]")
        elif action == "log":
            save_log(db_path, today, **_ask_log())
        elif action == "cycle":
            data = get_period_data(db_path)
            save_cycle_settings(
                db_path,
                ask("Last period start (YYYY-MM-DD)", default=data.last_period_start.isoformat()),
                ask_int("Cycle length (days)", default=data.cycle_length),
                ask_int("Period length (days)", default=data.period_length),
            )
        elif action == "add":
            add_special_day(db_path, ask("Title"), ask("Date (YYYY-MM-DD)"),
                            ask("Type", choices=["COUNTDOWN", "ANNIVERSARY"], default="COUNTDOWN"))
        elif action == "edit":
            special_id = ask_int("Event #")
            update_special_day(db_path, special_id, ask("Title"), ask("Date (YYYY-MM-DD)"),
                               ask("Type", choices=["COUNTDOWN", "ANNIVERSARY"], default="COUNTDOWN"))
        elif action == "delete":
            delete_special_day(db_path, ask_int("Event #"))


# --- Settings ---


def cmd_settings(db_path: str):
    settings = get_schedule_settings(db_path)
    breaks = ", ".join(f"after {k}: {v} min" for k, v in sorted(settings.specific_breaks.items())) or "none"
    console.print(Panel(
        f"Day starts {settings.start_hour:02d}:{settings.start_minute:02d}, "
        f"{settings.class_duration} min classes, {settings.break_duration} min breaks, "
        f"{settings.total_sections} sections\nCustom breaks: {breaks}\n"
        f"Notifications: {get_notification_permission(db_path)}",
        title="Settings",
    ))
    action = ask("Action", choices=["times", "break", "unbreak", "notify", "back"], default="back")
    if action == "times":
        settings.start_hour = ask_int("Start hour", default=settings.start_hour)
        settings.start_minute = ask_int("Start minute", default=settings.start_minute)
        settings.class_duration = ask_int("Class length (min)", default=settings.class_duration)
        settings.break_duration = ask_int("Break length (min)", default=settings.break_duration)
        settings.total_sections = ask_int("Sections per day", default=settings.total_sections)
        save_schedule_settings(db_path, settings)
    elif action == "break":
        section = ask_int("After section", choices=[str(i) for i in range(1, settings.total_sections)])
        set_specific_break(db_path, section, ask_int("Break length (min)", default=20))
    elif action == "unbreak":
        remove_specific_break(db_path, ask_int("After section"))
    elif action == "notify":
        set_notification_permission(db_path, Confirm.ask("Allow reminders?"))


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main():
    db_path = DEFAULT_DB_PATH
    anchor = open_store(db_path)
    setup_logging(get_log_level(db_path))
    if not is_seeded(db_path):
        console.print("[dim]Setting up for first use...[/dim]")
    seed_all(db_path)

    show_welcome()
    if get_notification_permission(db_path) == "default":
        set_notification_permission(db_path, Confirm.ask("Allow class and period reminders?", default=True))

    poller = ReminderPoller(db_path, show_notification, interval=get_poll_interval(db_path))
    poller.start()
    try:
        while True:
            show_menu()
            choice = Prompt.ask("\n[bold]>[/bold]", default="todo").strip().lower()
            try:
                if choice == "todo":
                    cmd_todo(db_path)
                elif choice == "notes":
                    cmd_notes(db_path)
                elif choice == "schedule":
                    cmd_schedule(db_path)
                elif choice == "calendar":
                    cmd_calendar(db_path)
                elif choice == "special":
                    cmd_special(db_path)
                elif choice == "settings":
                    cmd_settings(db_path)
                elif choice in ("quit", "exit", "q"):
                    console.print("[dim]See you tomorrow![/dim]")
                    break
                else:
                    console.print("[red]Unknown command. Try again.[/red]")
            except CommandCancelled:
                console.print("[dim]Back to menu.[/dim]")
            except KeyboardInterrupt:
                console.print("\n[dim]Use 'quit' to exit.[/dim]")
            except Exception as e:
                logger.debug("Command %s failed", choice, exc_info=True)
                console.print(f"[red]Error: {e}[/red]")
    finally:
        poller.stop()
        anchor.close()


if __name__ == "__main__":
    main()
