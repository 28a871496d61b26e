"""Planner data structures: events, time blocks, weekly goals and notes."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from ..utils.datetime_utils import utc_now
from ..utils.ids import generate_id
from .fields import Timestamp


class EventType(str, Enum):
    MEETING = "meeting"
    APPOINTMENT = "appointment"
    TASK = "task"
    REMINDER = "reminder"
    OTHER = "other"


class Event(SQLModel):
    """Calendar entry; events without ``end_time`` occupy their start day only."""

    id: str = Field(default_factory=generate_id)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    start_time: Timestamp
    end_time: Optional[Timestamp] = None
    type: EventType = EventType.OTHER
    location: Optional[str] = None
    is_all_day: bool = False
    color: Optional[str] = None
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)


class TimeBlock(SQLModel):
    """A scheduled stretch of focused time."""

    id: str = Field(default_factory=generate_id)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    start_time: Timestamp
    end_time: Timestamp
    color: Optional[str] = None
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)

    @property
    def duration_minutes(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 60


class WeeklyGoal(SQLModel):
    """Goal scoped to the week starting at ``week_start_date`` (a Sunday)."""

    id: str = Field(default_factory=generate_id)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    completed: bool = False
    week_start_date: Timestamp
    completed_at: Optional[Timestamp] = None
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)


class Note(SQLModel):
    id: str = Field(default_factory=generate_id)
    content: str
    date: Timestamp
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)


__all__ = ["Event", "EventType", "Note", "TimeBlock", "WeeklyGoal"]
