"""Habit slice reducers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models.habit import Habit
from ..services.habits import upsert_completion
from ..utils.datetime_utils import DateLike, utc_now
from .helpers import remove_by_id, replace_by_id, update_by_id
from .state import HabitsState


def _with_habits(state: HabitsState, habits: list[Habit]) -> HabitsState:
    if habits is state.habits:
        return state
    return state.model_copy(update={"habits": habits})


def add_habit(state: HabitsState, habit: Habit) -> HabitsState:
    return _with_habits(state, [*state.habits, habit])


def update_habit(
    state: HabitsState, habit: Habit, *, now: Optional[datetime] = None
) -> HabitsState:
    habit = habit.model_copy(update={"updated_at": now or utc_now()})
    return _with_habits(state, replace_by_id(state.habits, habit))


def delete_habit(state: HabitsState, habit_id: str) -> HabitsState:
    return _with_habits(state, remove_by_id(state.habits, habit_id))


def _set_archived(
    state: HabitsState, habit_id: str, archived: bool, now: Optional[datetime]
) -> HabitsState:
    stamp = now or utc_now()
    return _with_habits(
        state,
        update_by_id(
            state.habits,
            habit_id,
            lambda habit: habit.model_copy(update={"archived": archived, "updated_at": stamp}),
        ),
    )


def archive_habit(
    state: HabitsState, habit_id: str, *, now: Optional[datetime] = None
) -> HabitsState:
    return _set_archived(state, habit_id, True, now)


def unarchive_habit(
    state: HabitsState, habit_id: str, *, now: Optional[datetime] = None
) -> HabitsState:
    return _set_archived(state, habit_id, False, now)


def toggle_habit_completion(
    state: HabitsState,
    habit_id: str,
    day: DateLike,
    completed: bool,
    note: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> HabitsState:
    """Record whether the habit was completed on ``day`` (one record per day)."""

    return _with_habits(
        state,
        update_by_id(
            state.habits,
            habit_id,
            lambda habit: upsert_completion(habit, day, completed, note, now=now),
        ),
    )


def set_habits(state: HabitsState, habits: list[Habit]) -> HabitsState:
    return state.model_copy(update={"habits": list(habits)})


__all__ = [
    "add_habit",
    "archive_habit",
    "delete_habit",
    "set_habits",
    "toggle_habit_completion",
    "unarchive_habit",
    "update_habit",
]
