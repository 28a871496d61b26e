"""Habit tracking data structures."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import field_validator, model_validator
from sqlmodel import Field, SQLModel

from ..utils.datetime_utils import utc_now
from ..utils.ids import generate_id
from .fields import Day, Timestamp


class HabitFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class HabitCompletion(SQLModel):
    """Completion record for a habit on one calendar day."""

    day: Day
    completed: bool = False
    note: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_date_key(cls, data: Any) -> Any:
        # Stored records written by older clients use ``date`` instead of ``day``.
        if isinstance(data, dict) and "day" not in data and "date" in data:
            data = {**data, "day": data["date"]}
            data.pop("date")
        return data


class Habit(SQLModel):
    """A user-defined habit with its frequency rule and completion ledger.

    ``completions`` is keyed by calendar day so a habit can never hold two
    records for the same date.
    """

    id: str = Field(default_factory=generate_id)
    title: str = Field(min_length=1, max_length=120)
    description: Optional[str] = None
    frequency: HabitFrequency = HabitFrequency.DAILY
    # Weekday indices, Sunday = 0; only consulted for custom frequency.
    custom_days: list[int] = Field(default_factory=list)
    target: int = Field(default=1, ge=1)
    color: Optional[str] = None
    start_date: Timestamp
    end_date: Optional[Timestamp] = None
    reminder_time: Optional[Timestamp] = None
    completions: dict[Day, HabitCompletion] = Field(default_factory=dict)
    archived: bool = False
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)

    @field_validator("custom_days", mode="before")
    @classmethod
    def _normalize_custom_days(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (set, frozenset, tuple, list)):
            days = sorted({int(day) for day in value})
            if any(day < 0 or day > 6 for day in days):
                raise ValueError("custom_days must be weekday indices between 0 and 6")
            return days
        return value

    @field_validator("completions", mode="before")
    @classmethod
    def _fold_completion_list(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            folded: dict[date, HabitCompletion] = {}
            for item in value:
                record = (
                    item
                    if isinstance(item, HabitCompletion)
                    else HabitCompletion.model_validate(item)
                )
                # First record for a day wins, matching a front-to-back search.
                folded.setdefault(record.day, record)
            return folded
        return value

    @field_validator("completions")
    @classmethod
    def _key_by_record_day(
        cls, value: dict[date, HabitCompletion]
    ) -> dict[date, HabitCompletion]:
        keyed: dict[date, HabitCompletion] = {}
        for record in value.values():
            keyed.setdefault(record.day, record)
        return keyed


__all__ = ["Habit", "HabitCompletion", "HabitFrequency"]
