"""Command-line interface over the persisted Kairo store."""

from __future__ import annotations

import asyncio
import json
from datetime import date, datetime
from typing import Optional, Sequence, TypeVar

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .logging_config import setup_logging
from .models.assistant import MessageRole
from .models.habit import Habit, HabitFrequency
from .models.task import Task, TaskPriority, TaskStatus
from .services.assistant import generate_title
from .services.demo_seed import build_demo_state
from .services.habits import habit_progress
from .store import RootState
from .store import assistant as assistant_reducers
from .store import habits as habit_reducers
from .store import tasks as task_reducers
from .utils.datetime_utils import utc_today

DATE = click.DateTime(formats=["%Y-%m-%d"])

T = TypeVar("T", Habit, Task)


def _context(ctx: click.Context) -> AppContext:
    return ctx.obj["app"]


def _as_day(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value is not None else None


def _find(items: Sequence[T], ident: str, kind: str) -> T:
    """Resolve an exact id or a unique id prefix."""

    exact = [item for item in items if item.id == ident]
    if exact:
        return exact[0]
    matches = [item for item in items if item.id.startswith(ident)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise click.ClickException(f"No {kind} with id {ident!r}")
    raise click.ClickException(f"Ambiguous {kind} id {ident!r}; use more characters")


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Kairo: habits, tasks and planning analytics."""

    config = BaseConfig()
    setup_logging(config)
    ctx.ensure_object(dict)
    ctx.obj["app"] = create_app_context(config)


@cli.command("seed")
@click.option("--demo/--empty", default=True, help="Load demo data or reset to an empty store")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing data")
@click.pass_context
def seed(ctx: click.Context, demo: bool, force: bool) -> None:
    """Populate the store."""

    app = _context(ctx)
    state = app.store.state
    has_data = bool(state.tasks.tasks or state.habits.habits or state.planner.time_blocks)
    if has_data and not force:
        raise click.ClickException("Store already has data; pass --force to overwrite")

    new_state = build_demo_state() if demo else RootState()
    app.store.replace_state(new_state)
    app.state_repo.save_root(new_state)
    click.echo("Demo data loaded." if demo else "Store reset.")


@cli.command("analytics")
@click.option("--as-of", type=DATE, default=None, help="Evaluate habits as of this day")
@click.pass_context
def analytics(ctx: click.Context, as_of: Optional[datetime]) -> None:
    """Print the analytics snapshot as JSON."""

    state = _context(ctx).analytics(as_of=_as_day(as_of))
    click.echo(json.dumps(state.to_dict(), indent=2))


@cli.command("habits")
@click.option("--as-of", type=DATE, default=None)
@click.option("--all", "show_all", is_flag=True, default=False, help="Include archived habits")
@click.pass_context
def list_habits(ctx: click.Context, as_of: Optional[datetime], show_all: bool) -> None:
    """List habits with today's status, streaks and completion rate."""

    day = _as_day(as_of) or utc_today()
    habits = _context(ctx).store.state.habits.habits
    shown = [habit for habit in habits if show_all or not habit.archived]
    if not shown:
        click.echo("No habits yet.")
        return
    for habit in shown:
        progress = habit_progress(habit, as_of=day)
        if progress.status.completed:
            mark = "done"
        elif progress.due:
            mark = "due"
        else:
            mark = "-"
        click.echo(
            f"{habit.id[:8]}  {habit.title:<24} {mark:<5} "
            f"streak {progress.current_streak} (best {progress.longest_streak})  "
            f"{progress.completion_rate:.0f}%"
        )


@cli.command("habit-add")
@click.argument("title")
@click.option(
    "--frequency",
    type=click.Choice([f.value for f in HabitFrequency]),
    default=HabitFrequency.DAILY.value,
    show_default=True,
)
@click.option("--day", "days", type=click.IntRange(0, 6), multiple=True, help="Weekday (Sunday=0) for custom habits")
@click.option("--start", type=DATE, default=None, help="First day (defaults to today, UTC)")
@click.option("--end", type=DATE, default=None, help="Last day, inclusive")
@click.pass_context
def habit_add(
    ctx: click.Context,
    title: str,
    frequency: str,
    days: tuple[int, ...],
    start: Optional[datetime],
    end: Optional[datetime],
) -> None:
    """Create a habit."""

    if frequency == HabitFrequency.CUSTOM.value and not days:
        raise click.BadParameter("custom habits need at least one --day", param_hint="--day")
    habit = Habit(
        title=title,
        frequency=HabitFrequency(frequency),
        custom_days=list(days),
        start_date=start or datetime.combine(utc_today(), datetime.min.time()),
        end_date=end,
    )
    _context(ctx).store.dispatch("habits", habit_reducers.add_habit, habit)
    click.echo(habit.id)


@cli.command("check-in")
@click.argument("habit_id")
@click.option("--date", "on", type=DATE, default=None, help="Day to record (defaults to today, UTC)")
@click.option("--undo", is_flag=True, default=False, help="Mark as not completed")
@click.option("--note", default=None)
@click.pass_context
def check_in(
    ctx: click.Context, habit_id: str, on: Optional[datetime], undo: bool, note: Optional[str]
) -> None:
    """Record a habit completion."""

    app = _context(ctx)
    habit = _find(app.store.state.habits.habits, habit_id, "habit")
    day = _as_day(on) or utc_today()
    app.store.dispatch(
        "habits", habit_reducers.toggle_habit_completion, habit.id, day, not undo, note
    )
    click.echo(f"{habit.title}: {'not done' if undo else 'done'} on {day.isoformat()}")


@cli.command("archive")
@click.argument("habit_id")
@click.option("--restore", is_flag=True, default=False, help="Unarchive instead")
@click.pass_context
def archive(ctx: click.Context, habit_id: str, restore: bool) -> None:
    """Archive or restore a habit."""

    app = _context(ctx)
    habit = _find(app.store.state.habits.habits, habit_id, "habit")
    reducer = habit_reducers.unarchive_habit if restore else habit_reducers.archive_habit
    app.store.dispatch("habits", reducer, habit.id)
    click.echo(f"{habit.title}: {'restored' if restore else 'archived'}")


@cli.command("tasks")
@click.pass_context
def list_tasks(ctx: click.Context) -> None:
    """List tasks."""

    tasks = _context(ctx).store.state.tasks.tasks
    if not tasks:
        click.echo("No tasks yet.")
        return
    for task in tasks:
        click.echo(f"{task.id[:8]}  [{task.status.value:<11}] {task.priority.value:<6} {task.title}")


@cli.command("task-add")
@click.argument("title")
@click.option(
    "--priority",
    type=click.Choice([p.value for p in TaskPriority]),
    default=TaskPriority.MEDIUM.value,
    show_default=True,
)
@click.option("--due", type=DATE, default=None)
@click.option("--tag", "tags", multiple=True)
@click.pass_context
def task_add(
    ctx: click.Context, title: str, priority: str, due: Optional[datetime], tags: tuple[str, ...]
) -> None:
    """Create a task."""

    task = Task(title=title, priority=TaskPriority(priority), due_date=due, tags=list(tags))
    _context(ctx).store.dispatch("tasks", task_reducers.add_task, task)
    click.echo(task.id)


@cli.command("task-status")
@click.argument("task_id")
@click.argument("status", type=click.Choice([s.value for s in TaskStatus]))
@click.pass_context
def task_status(ctx: click.Context, task_id: str, status: str) -> None:
    """Move a task to a new status."""

    app = _context(ctx)
    task = _find(app.store.state.tasks.tasks, task_id, "task")
    app.store.dispatch("tasks", task_reducers.update_task_status, task.id, TaskStatus(status))
    click.echo(f"{task.title}: {status}")


@cli.command("ask")
@click.argument("message")
@click.pass_context
def ask(ctx: click.Context, message: str) -> None:
    """Send a message to the assistant in the active conversation."""

    app = _context(ctx)
    store = app.store
    if store.state.assistant.active_conversation_id is None:
        store.dispatch("assistant", assistant_reducers.create_conversation, generate_title(message))
    conversation_id = store.state.assistant.active_conversation_id

    store.dispatch(
        "assistant", assistant_reducers.add_message, conversation_id, MessageRole.USER, message
    )
    store.dispatch("assistant", assistant_reducers.set_loading, True)
    try:
        reply = asyncio.run(app.assistant.send_message(message))
    finally:
        store.dispatch("assistant", assistant_reducers.set_loading, False)
    store.dispatch("assistant", assistant_reducers.add_assistant_response, conversation_id, reply)
    click.echo(reply)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":  # pragma: no cover
    main()
