"""Pure slice reducers and the state container that applies them."""

from . import assistant, habits, planner, tasks
from .container import Store
from .state import (
    SLICE_TYPES,
    AssistantState,
    HabitsState,
    PlannerState,
    RootState,
    TasksState,
)

__all__ = [
    "AssistantState",
    "HabitsState",
    "PlannerState",
    "RootState",
    "SLICE_TYPES",
    "Store",
    "TasksState",
    "assistant",
    "habits",
    "planner",
    "tasks",
]
