"""Analytics aggregation over task, habit, time-block and goal snapshots.

Each ``calculate_*`` function is an independent, order-insensitive reduction
over one collection. ``calculate_analytics`` composes them into a fresh
``AnalyticsState``; there is no incremental bookkeeping, callers recompute
whenever a source collection changes.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Iterable, Optional

from ..logging_config import get_logger
from ..models.habit import Habit
from ..models.planner import TimeBlock, WeeklyGoal
from ..models.task import Task, TaskPriority, TaskStatus
from ..utils.datetime_utils import WEEKDAY_NAMES, DateLike, utc_now, weekday_index
from .habits import completion_rate, current_streak, longest_streak

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class PriorityBreakdown:
    high: int
    medium: int
    low: int


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    completed: int
    in_progress: int
    todo: int
    completion_rate: float
    average_completion_time: float  # hours
    by_priority: PriorityBreakdown


@dataclass(slots=True, frozen=True)
class StreakSummary:
    current: int  # mean of per-habit current streaks
    longest: int  # best run across all habits


@dataclass(slots=True, frozen=True)
class HabitStats:
    total: int
    active: int
    archived: int
    streaks: StreakSummary
    completion_rate: float
    most_consistent: Optional[str]
    least_consistent: Optional[str]


@dataclass(slots=True, frozen=True)
class TimeStats:
    total_time_blocks: int
    total_hours: float
    average_block_length: float  # minutes
    most_productive_day: str
    most_productive_time: str


@dataclass(slots=True, frozen=True)
class GoalStats:
    total: int
    completed: int
    completion_rate: float


@dataclass(slots=True, frozen=True)
class AnalyticsState:
    """Snapshot of every derived statistic, stamped with when it was computed."""

    task_stats: TaskStats
    habit_stats: HabitStats
    time_stats: TimeStats
    goal_stats: GoalStats
    last_updated: datetime

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["last_updated"] = self.last_updated.isoformat()
        return data


def _percentage(part: int, whole: int) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_task_stats(tasks: Iterable[Task]) -> TaskStats:
    """Count tasks by status and priority and average their time to completion."""

    items = list(tasks)
    total = len(items)
    completed = sum(1 for task in items if task.status == TaskStatus.COMPLETED)
    in_progress = sum(1 for task in items if task.status == TaskStatus.IN_PROGRESS)
    todo = sum(1 for task in items if task.status == TaskStatus.TODO)

    hours: list[float] = [
        (task.completed_at - task.created_at).total_seconds() / 3600
        for task in items
        if task.status == TaskStatus.COMPLETED and task.completed_at and task.created_at
    ]
    average_completion_time = sum(hours) / len(hours) if hours else 0.0

    return TaskStats(
        total=total,
        completed=completed,
        in_progress=in_progress,
        todo=todo,
        completion_rate=_percentage(completed, total),
        average_completion_time=average_completion_time,
        by_priority=PriorityBreakdown(
            high=sum(1 for task in items if task.priority == TaskPriority.HIGH),
            medium=sum(1 for task in items if task.priority == TaskPriority.MEDIUM),
            low=sum(1 for task in items if task.priority == TaskPriority.LOW),
        ),
    )


def calculate_habit_stats(
    habits: Iterable[Habit], *, as_of: DateLike | None = None
) -> HabitStats:
    """Summarize streaks and consistency across all habits, archived ones included."""

    items = list(habits)
    total = len(items)
    archived = sum(1 for habit in items if habit.archived)

    current_total = 0
    longest = 0
    rate_total = 0.0
    most_consistent: Optional[str] = None
    least_consistent: Optional[str] = None
    highest_rate = 0.0
    lowest_rate = 100.0

    for habit in items:
        current_total += current_streak(habit, as_of=as_of)
        longest = max(longest, longest_streak(habit))

        rate = completion_rate(habit, as_of=as_of)
        rate_total += rate
        # Strict comparisons: the first habit reaching an extreme keeps it.
        if rate > highest_rate:
            highest_rate = rate
            most_consistent = habit.id
        if rate < lowest_rate and habit.completions:
            lowest_rate = rate
            least_consistent = habit.id

    return HabitStats(
        total=total,
        active=total - archived,
        archived=archived,
        streaks=StreakSummary(
            current=_round_half_up(current_total / (total or 1)),
            longest=longest,
        ),
        completion_rate=rate_total / total if total > 0 else 0.0,
        most_consistent=most_consistent,
        least_consistent=least_consistent,
    )


def calculate_time_stats(time_blocks: Iterable[TimeBlock]) -> TimeStats:
    """Total the scheduled time and find the busiest weekday and start hour."""

    items = list(time_blocks)
    total_minutes = sum(block.duration_minutes for block in items)

    day_counts = [0] * 7
    hour_counts = [0] * 24
    for block in items:
        day_counts[weekday_index(block.start_time)] += 1
        hour_counts[block.start_time.hour] += 1

    # list.index returns the first maximum, so ties go to the lowest index.
    busiest_day = day_counts.index(max(day_counts))
    busiest_hour = hour_counts.index(max(hour_counts))

    return TimeStats(
        total_time_blocks=len(items),
        total_hours=total_minutes / 60,
        average_block_length=total_minutes / len(items) if items else 0.0,
        most_productive_day=WEEKDAY_NAMES[busiest_day],
        most_productive_time=f"{busiest_hour}:00 - {busiest_hour + 1}:00",
    )


def calculate_goal_stats(goals: Iterable[WeeklyGoal]) -> GoalStats:
    items = list(goals)
    completed = sum(1 for goal in items if goal.completed)
    return GoalStats(
        total=len(items),
        completed=completed,
        completion_rate=_percentage(completed, len(items)),
    )


def calculate_analytics(
    tasks: Iterable[Task],
    habits: Iterable[Habit],
    time_blocks: Iterable[TimeBlock],
    goals: Iterable[WeeklyGoal],
    *,
    as_of: DateLike | None = None,
    now: Optional[datetime] = None,
) -> AnalyticsState:
    """Recompute every statistic from the supplied snapshots."""

    state = AnalyticsState(
        task_stats=calculate_task_stats(tasks),
        habit_stats=calculate_habit_stats(habits, as_of=as_of),
        time_stats=calculate_time_stats(time_blocks),
        goal_stats=calculate_goal_stats(goals),
        last_updated=now or utc_now(),
    )
    logger.debug(
        "Analytics recomputed",
        extra={
            "tasks": state.task_stats.total,
            "habits": state.habit_stats.total,
            "time_blocks": state.time_stats.total_time_blocks,
            "goals": state.goal_stats.total,
        },
    )
    return state


__all__ = [
    "AnalyticsState",
    "GoalStats",
    "HabitStats",
    "PriorityBreakdown",
    "StreakSummary",
    "TaskStats",
    "TimeStats",
    "calculate_analytics",
    "calculate_goal_stats",
    "calculate_habit_stats",
    "calculate_task_stats",
    "calculate_time_stats",
]
