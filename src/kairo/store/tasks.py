"""Task slice reducers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models.task import Task, TaskStatus
from ..utils.datetime_utils import utc_now
from .helpers import remove_by_id, replace_by_id, update_by_id
from .state import TasksState


def _with_tasks(state: TasksState, tasks: list[Task]) -> TasksState:
    if tasks is state.tasks:
        return state
    return state.model_copy(update={"tasks": tasks})


def _sync_completed_at(task: Task, now: datetime) -> Task:
    if task.status == TaskStatus.COMPLETED and task.completed_at is None:
        return task.model_copy(update={"completed_at": now})
    if task.status != TaskStatus.COMPLETED and task.completed_at is not None:
        return task.model_copy(update={"completed_at": None})
    return task


def add_task(state: TasksState, task: Task, *, now: Optional[datetime] = None) -> TasksState:
    task = _sync_completed_at(task, now or utc_now())
    return _with_tasks(state, [*state.tasks, task])


def update_task(state: TasksState, task: Task, *, now: Optional[datetime] = None) -> TasksState:
    """Replace the stored task with the same id, refreshing ``updated_at``."""

    now = now or utc_now()
    task = _sync_completed_at(task.model_copy(update={"updated_at": now}), now)
    return _with_tasks(state, replace_by_id(state.tasks, task))


def delete_task(state: TasksState, task_id: str) -> TasksState:
    return _with_tasks(state, remove_by_id(state.tasks, task_id))


def update_task_status(
    state: TasksState,
    task_id: str,
    status: TaskStatus,
    *,
    now: Optional[datetime] = None,
) -> TasksState:
    """Move a task to ``status``; ``completed_at`` is stamped on entering completed."""

    now = now or utc_now()

    def change(task: Task) -> Task:
        completed_at = task.completed_at if task.status == TaskStatus.COMPLETED else now
        return task.model_copy(
            update={
                "status": status,
                "updated_at": now,
                "completed_at": completed_at if status == TaskStatus.COMPLETED else None,
            }
        )

    return _with_tasks(state, update_by_id(state.tasks, task_id, change))


def set_tasks(state: TasksState, tasks: list[Task]) -> TasksState:
    return state.model_copy(update={"tasks": list(tasks)})


__all__ = ["add_task", "delete_task", "set_tasks", "update_task", "update_task_status"]
