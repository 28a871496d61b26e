"""Immutable-by-convention snapshots of each store slice.

Reducers never mutate these objects; they return copies built with
``model_copy(update=...)``.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel

from ..models.assistant import Conversation
from ..models.habit import Habit
from ..models.planner import Event, Note, TimeBlock, WeeklyGoal
from ..models.task import Task


class TasksState(SQLModel):
    tasks: list[Task] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None


class HabitsState(SQLModel):
    habits: list[Habit] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None


class PlannerState(SQLModel):
    events: list[Event] = Field(default_factory=list)
    time_blocks: list[TimeBlock] = Field(default_factory=list)
    weekly_goals: list[WeeklyGoal] = Field(default_factory=list)
    notes: list[Note] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None


class AssistantState(SQLModel):
    conversations: list[Conversation] = Field(default_factory=list)
    active_conversation_id: Optional[str] = None
    is_loading: bool = False
    error: Optional[str] = None


class RootState(SQLModel):
    """All slices together, keyed the way they are persisted."""

    tasks: TasksState = Field(default_factory=TasksState)
    habits: HabitsState = Field(default_factory=HabitsState)
    planner: PlannerState = Field(default_factory=PlannerState)
    assistant: AssistantState = Field(default_factory=AssistantState)


SLICE_TYPES: dict[str, type[SQLModel]] = {
    "tasks": TasksState,
    "habits": HabitsState,
    "planner": PlannerState,
    "assistant": AssistantState,
}

__all__ = [
    "AssistantState",
    "HabitsState",
    "PlannerState",
    "RootState",
    "SLICE_TYPES",
    "TasksState",
]
