"""Planner slice reducers for events, time blocks, weekly goals and notes."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..models.planner import Event, Note, TimeBlock, WeeklyGoal
from ..utils.datetime_utils import start_of_week, utc_now
from .helpers import remove_by_id, replace_by_id, update_by_id
from .state import PlannerState


def _with(state: PlannerState, field: str, items: list[Any]) -> PlannerState:
    if items is getattr(state, field):
        return state
    return state.model_copy(update={field: items})


def _add(state: PlannerState, field: str, item: Any) -> PlannerState:
    return _with(state, field, [*getattr(state, field), item])


def _update(state: PlannerState, field: str, item: Any, now: Optional[datetime]) -> PlannerState:
    item = item.model_copy(update={"updated_at": now or utc_now()})
    return _with(state, field, replace_by_id(getattr(state, field), item))


def _delete(state: PlannerState, field: str, item_id: str) -> PlannerState:
    return _with(state, field, remove_by_id(getattr(state, field), item_id))


# Events

def add_event(state: PlannerState, event: Event) -> PlannerState:
    return _add(state, "events", event)


def update_event(state: PlannerState, event: Event, *, now: Optional[datetime] = None) -> PlannerState:
    return _update(state, "events", event, now)


def delete_event(state: PlannerState, event_id: str) -> PlannerState:
    return _delete(state, "events", event_id)


def set_events(state: PlannerState, events: list[Event]) -> PlannerState:
    return state.model_copy(update={"events": list(events)})


# Time blocks

def _ensure_valid_block(block: TimeBlock) -> None:
    if block.end_time <= block.start_time:
        raise ValueError(f"Time block {block.title!r} must end after it starts")


def add_time_block(state: PlannerState, block: TimeBlock) -> PlannerState:
    _ensure_valid_block(block)
    return _add(state, "time_blocks", block)


def update_time_block(
    state: PlannerState, block: TimeBlock, *, now: Optional[datetime] = None
) -> PlannerState:
    _ensure_valid_block(block)
    return _update(state, "time_blocks", block, now)


def delete_time_block(state: PlannerState, block_id: str) -> PlannerState:
    return _delete(state, "time_blocks", block_id)


def set_time_blocks(state: PlannerState, blocks: list[TimeBlock]) -> PlannerState:
    return state.model_copy(update={"time_blocks": list(blocks)})


# Weekly goals

def _week_start(value: datetime) -> datetime:
    return start_of_week(value).replace(tzinfo=value.tzinfo)


def add_weekly_goal(state: PlannerState, goal: WeeklyGoal) -> PlannerState:
    """Store ``goal`` with its week normalized to the Sunday that starts it."""

    goal = goal.model_copy(update={"week_start_date": _week_start(goal.week_start_date)})
    return _add(state, "weekly_goals", goal)


def update_weekly_goal(
    state: PlannerState, goal: WeeklyGoal, *, now: Optional[datetime] = None
) -> PlannerState:
    goal = goal.model_copy(update={"week_start_date": _week_start(goal.week_start_date)})
    return _update(state, "weekly_goals", goal, now)


def delete_weekly_goal(state: PlannerState, goal_id: str) -> PlannerState:
    return _delete(state, "weekly_goals", goal_id)


def toggle_weekly_goal_completion(
    state: PlannerState, goal_id: str, completed: bool, *, now: Optional[datetime] = None
) -> PlannerState:
    stamp = now or utc_now()

    def change(goal: WeeklyGoal) -> WeeklyGoal:
        return goal.model_copy(
            update={
                "completed": completed,
                "completed_at": stamp if completed else None,
                "updated_at": stamp,
            }
        )

    return _with(state, "weekly_goals", update_by_id(state.weekly_goals, goal_id, change))


def set_weekly_goals(state: PlannerState, goals: list[WeeklyGoal]) -> PlannerState:
    return state.model_copy(update={"weekly_goals": list(goals)})


# Notes

def add_note(state: PlannerState, note: Note) -> PlannerState:
    return _add(state, "notes", note)


def update_note(state: PlannerState, note: Note, *, now: Optional[datetime] = None) -> PlannerState:
    return _update(state, "notes", note, now)


def delete_note(state: PlannerState, note_id: str) -> PlannerState:
    return _delete(state, "notes", note_id)


def set_notes(state: PlannerState, notes: list[Note]) -> PlannerState:
    return state.model_copy(update={"notes": list(notes)})
