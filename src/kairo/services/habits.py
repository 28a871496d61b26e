"""Habit scheduling, completion ledger, streak and completion-rate helpers.

Every function here is pure: habits are read as snapshots and ledger writes
return a new ``Habit``. Callers pass ``as_of`` explicitly when evaluating
against a day other than today; "today" is the current UTC day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..models.habit import Habit, HabitCompletion, HabitFrequency
from ..utils.datetime_utils import (
    DateLike,
    daterange,
    days_in_month,
    to_day,
    utc_now,
    utc_today,
    weekday_index,
)


@dataclass(slots=True, frozen=True)
class CompletionStatus:
    """Completion state of a habit on one day."""

    completed: bool
    note: Optional[str] = None


@dataclass(slots=True, frozen=True)
class HabitProgress:
    """Per-habit figures shown next to a habit in list views."""

    habit_id: str
    title: str
    due: bool
    status: CompletionStatus
    current_streak: int
    longest_streak: int
    completion_rate: float


def _resolve_day(as_of: DateLike | None) -> date:
    return to_day(as_of) if as_of is not None else utc_today()


def is_due(habit: Habit, day: DateLike) -> bool:
    """Return True when the habit's frequency requires action on ``day``."""

    target = to_day(day)
    start = to_day(habit.start_date)
    if target < start:
        return False
    if habit.end_date is not None and target > to_day(habit.end_date):
        return False

    if habit.frequency == HabitFrequency.DAILY:
        return True
    if habit.frequency == HabitFrequency.WEEKLY:
        return target.weekday() == start.weekday()
    if habit.frequency == HabitFrequency.MONTHLY:
        # Start days missing from a shorter month fall on that month's last day.
        anchor = min(start.day, days_in_month(target.year, target.month))
        return target.day == anchor
    if habit.frequency == HabitFrequency.CUSTOM:
        return weekday_index(target) in (habit.custom_days or [])
    return False


def due_days(habit: Habit, start: DateLike, end: DateLike) -> list[date]:
    """Return the days between ``start`` and ``end`` (inclusive) the habit is due."""

    return [day for day in daterange(start, end) if is_due(habit, day)]


def get_completion(habit: Habit, day: DateLike) -> CompletionStatus:
    """Look up the ledger entry for ``day``; missing days read as not completed."""

    record = habit.completions.get(to_day(day))
    if record is None:
        return CompletionStatus(completed=False)
    return CompletionStatus(completed=record.completed, note=record.note)


def set_completion(
    habit: Habit,
    day: DateLike,
    completed: bool,
    note: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> Habit:
    """Return a copy of ``habit`` with the record for ``day`` inserted or replaced."""

    key = to_day(day)
    completions = dict(habit.completions)
    completions[key] = HabitCompletion(day=key, completed=completed, note=note)
    return habit.model_copy(
        update={"completions": completions, "updated_at": now or utc_now()}
    )


upsert_completion = set_completion


def _completed_days(habit: Habit) -> list[date]:
    return sorted(day for day, record in habit.completions.items() if record.completed)


def current_streak(habit: Habit, *, as_of: DateLike | None = None) -> int:
    """Count consecutive completed days ending today or yesterday.

    A habit whose latest completion is older than yesterday has no current
    streak. Completions dated after ``as_of`` are ignored.
    """

    today = _resolve_day(as_of)
    days = [day for day in _completed_days(habit) if day <= today]
    if not days:
        return 0

    days.reverse()
    if days[0] < today - timedelta(days=1):
        return 0

    streak = 1
    cursor = days[0]
    for day in days[1:]:
        if day != cursor - timedelta(days=1):
            break
        streak += 1
        cursor = day
    return streak


def longest_streak(habit: Habit) -> int:
    """Return the longest run of consecutive completed days in the ledger."""

    longest = 0
    run = 0
    last_day: date | None = None
    for day in _completed_days(habit):
        if last_day is not None and day == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day
    return longest


def compute_streaks(habit: Habit, *, as_of: DateLike | None = None) -> tuple[int, int]:
    """Return (current_streak, longest_streak)."""

    return current_streak(habit, as_of=as_of), longest_streak(habit)


def completion_rate(habit: Habit, *, as_of: DateLike | None = None) -> float:
    """Percentage of due days from the habit's start through ``as_of`` that were completed."""

    end = _resolve_day(as_of)
    start = to_day(habit.start_date)
    if end < start:
        return 0.0

    total_due = 0
    completed = 0
    for day in daterange(start, end):
        if not is_due(habit, day):
            continue
        total_due += 1
        record = habit.completions.get(day)
        if record is not None and record.completed:
            completed += 1

    if total_due == 0:
        return 0.0
    return completed / total_due * 100


def habit_progress(habit: Habit, *, as_of: DateLike | None = None) -> HabitProgress:
    """Collect the list-view figures for one habit."""

    today = _resolve_day(as_of)
    current, longest = compute_streaks(habit, as_of=today)
    return HabitProgress(
        habit_id=habit.id,
        title=habit.title,
        due=is_due(habit, today),
        status=get_completion(habit, today),
        current_streak=current,
        longest_streak=longest,
        completion_rate=completion_rate(habit, as_of=today),
    )


__all__ = [
    "CompletionStatus",
    "HabitProgress",
    "completion_rate",
    "compute_streaks",
    "current_streak",
    "due_days",
    "get_completion",
    "habit_progress",
    "is_due",
    "longest_streak",
    "set_completion",
    "upsert_completion",
]
