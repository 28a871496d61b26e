"""Task records."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from ..utils.datetime_utils import utc_now
from ..utils.ids import generate_id
from .fields import Timestamp


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Task(SQLModel):
    """A to-do item; ``completed_at`` is only set while the task is completed."""

    id: str = Field(default_factory=generate_id)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    due_date: Optional[Timestamp] = None
    completed_at: Optional[Timestamp] = None
    tags: list[str] = Field(default_factory=list)
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)


__all__ = ["Task", "TaskPriority", "TaskStatus"]
