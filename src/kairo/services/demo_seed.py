"""Deterministic demo data for first runs and manual testing."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from ..models.habit import Habit, HabitCompletion, HabitFrequency
from ..models.planner import Event, EventType, Note, TimeBlock, WeeklyGoal
from ..models.task import Task, TaskPriority, TaskStatus
from ..store.state import HabitsState, PlannerState, RootState, TasksState
from ..utils.datetime_utils import start_of_week, utc_today


def _at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute), tzinfo=timezone.utc)


def _demo_tasks(today: date) -> list[Task]:
    created = _at(today - timedelta(days=6), 9)
    return [
        Task(
            title="Draft quarterly plan",
            priority=TaskPriority.HIGH,
            status=TaskStatus.COMPLETED,
            created_at=created,
            updated_at=_at(today - timedelta(days=5), 15),
            completed_at=_at(today - timedelta(days=5), 15),
            tags=["work"],
        ),
        Task(
            title="Book dentist appointment",
            priority=TaskPriority.LOW,
            status=TaskStatus.COMPLETED,
            created_at=created,
            updated_at=_at(today - timedelta(days=4), 11),
            completed_at=_at(today - timedelta(days=4), 11),
            tags=["personal"],
        ),
        Task(
            title="Review pull requests",
            priority=TaskPriority.MEDIUM,
            status=TaskStatus.IN_PROGRESS,
            created_at=created,
            updated_at=created,
            due_date=_at(today + timedelta(days=1), 17),
            tags=["work"],
        ),
        Task(
            title="Plan weekend trip",
            priority=TaskPriority.MEDIUM,
            created_at=created,
            updated_at=created,
        ),
        Task(
            title="Renew passport",
            priority=TaskPriority.HIGH,
            created_at=created,
            updated_at=created,
            due_date=_at(today + timedelta(days=14), 12),
        ),
    ]


def _completions(days: list[date]) -> dict[date, HabitCompletion]:
    return {day: HabitCompletion(day=day, completed=True) for day in days}


def _demo_habits(today: date) -> list[Habit]:
    start = today - timedelta(days=20)
    meditation_days = [today - timedelta(days=offset) for offset in range(0, 6)]
    meditation_days += [today - timedelta(days=offset) for offset in range(9, 15)]
    workout_start = today - timedelta(days=21)
    return [
        Habit(
            title="Meditate",
            description="Ten minutes after waking up",
            frequency=HabitFrequency.DAILY,
            start_date=_at(start, 0),
            completions=_completions(meditation_days),
            color="#7C3AED",
        ),
        Habit(
            title="Long run",
            frequency=HabitFrequency.WEEKLY,
            start_date=_at(workout_start, 0),
            completions=_completions([workout_start, workout_start + timedelta(days=7)]),
            color="#059669",
        ),
        Habit(
            title="Strength training",
            frequency=HabitFrequency.CUSTOM,
            custom_days=[1, 3, 5],
            start_date=_at(start, 0),
            color="#DC2626",
        ),
        Habit(
            title="Journal",
            frequency=HabitFrequency.DAILY,
            start_date=_at(start - timedelta(days=30), 0),
            end_date=_at(start, 23, 59),
            completions=_completions([start - timedelta(days=2), start - timedelta(days=1)]),
            archived=True,
        ),
    ]


def _demo_planner(today: date) -> PlannerState:
    week_start = start_of_week(today)
    blocks = [
        TimeBlock(
            title="Deep work",
            start_time=_at(today - timedelta(days=offset), 9),
            end_time=_at(today - timedelta(days=offset), 11),
        )
        for offset in range(1, 4)
    ]
    blocks.append(
        TimeBlock(
            title="Email triage",
            start_time=_at(today, 14),
            end_time=_at(today, 14, 30),
        )
    )
    return PlannerState(
        events=[
            Event(
                title="Team sync",
                type=EventType.MEETING,
                start_time=_at(today, 10),
                end_time=_at(today, 10, 30),
            ),
        ],
        time_blocks=blocks,
        weekly_goals=[
            WeeklyGoal(
                title="Ship the planner view",
                week_start_date=week_start,
                completed=True,
                completed_at=_at(today, 12),
            ),
            WeeklyGoal(title="Read two chapters", week_start_date=week_start),
        ],
        notes=[Note(content="Try time blocking mornings only.", date=_at(today, 8))],
    )


def build_demo_state(today: Optional[date] = None) -> RootState:
    """Return a populated ``RootState`` anchored on ``today``."""

    anchor = today or utc_today()
    return RootState(
        tasks=TasksState(tasks=_demo_tasks(anchor)),
        habits=HabitsState(habits=_demo_habits(anchor)),
        planner=_demo_planner(anchor),
    )


__all__ = ["build_demo_state"]
