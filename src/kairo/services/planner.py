"""Day and week lookups over planner collections."""

from __future__ import annotations

from typing import Iterable

from ..models.planner import Event, TimeBlock, WeeklyGoal
from ..utils.datetime_utils import (
    DateLike,
    is_within,
    start_of_week,
    time_ranges_overlap,
    to_day,
)


def events_for_date(events: Iterable[Event], day: DateLike) -> list[Event]:
    """Return events occurring on ``day``; multi-day events match every day they span."""

    return [
        event
        for event in events
        if is_within(day, event.start_time, event.end_time or event.start_time)
    ]


def time_blocks_for_date(time_blocks: Iterable[TimeBlock], day: DateLike) -> list[TimeBlock]:
    """Return blocks starting on ``day`` ordered by start time."""

    target = to_day(day)
    matches = [block for block in time_blocks if to_day(block.start_time) == target]
    return sorted(matches, key=lambda block: block.start_time)


def weekly_goals_for_week(goals: Iterable[WeeklyGoal], day: DateLike) -> list[WeeklyGoal]:
    """Return goals whose week is the one containing ``day``."""

    week_start = start_of_week(day).date()
    return [goal for goal in goals if to_day(goal.week_start_date) == week_start]


def overlapping_time_blocks(
    time_blocks: Iterable[TimeBlock], candidate: TimeBlock
) -> list[TimeBlock]:
    """Return existing blocks (other than ``candidate`` itself) that overlap it."""

    return [
        block
        for block in time_blocks
        if block.id != candidate.id
        and time_ranges_overlap(
            block.start_time, block.end_time, candidate.start_time, candidate.end_time
        )
    ]


__all__ = [
    "events_for_date",
    "overlapping_time_blocks",
    "time_blocks_for_date",
    "weekly_goals_for_week",
]
