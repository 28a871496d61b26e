"""Pytest configuration and shared fixtures for Kairo tests.

This module provides model factories, an isolated SQLite database per test and
a configuration pointed at a temporary data directory, so no test touches the
real store.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional

import pytest
from sqlmodel import SQLModel, create_engine

from kairo.config import BaseConfig
from kairo.infra.database import create_session_factory
from kairo.models import (
    Habit,
    HabitCompletion,
    HabitFrequency,
    Task,
    TaskPriority,
    TaskStatus,
    TimeBlock,
    WeeklyGoal,
)


def assert_float_equal(actual: float, expected: float, tolerance: float = 1e-6) -> None:
    """Assert two floats are equal within tolerance."""
    assert abs(actual - expected) <= tolerance, f"{actual} != {expected} (±{tolerance})"


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


# =============================================================================
# Configuration & database fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_kairo_logging():
    """Drop handlers installed by setup_logging so they never outlive a test."""

    yield
    logger = logging.getLogger("kairo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def app_config(tmp_path, monkeypatch) -> BaseConfig:
    """Configuration rooted in a temporary data directory with quiet console logs."""

    monkeypatch.setenv("KAIRO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("KAIRO_DEV_MODE", "false")
    monkeypatch.setenv("KAIRO_ASSISTANT_DELAY", "0")
    monkeypatch.delenv("KAIRO_DATABASE_URL", raising=False)
    return BaseConfig()


@pytest.fixture
def db_engine(tmp_path):
    """Create an isolated SQLite database file for each test."""

    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


# =============================================================================
# Test data factories
# =============================================================================


@pytest.fixture
def habit_factory():
    """Factory for habits with sensible defaults.

    ``done`` lists days recorded as completed; ``missed`` lists days recorded
    as explicitly not completed.
    """

    def _create_habit(
        title: str = "Exercise",
        *,
        frequency: HabitFrequency = HabitFrequency.DAILY,
        start: date = date(2024, 1, 1),
        end: Optional[date] = None,
        custom_days: Iterable[int] = (),
        done: Iterable[date] = (),
        missed: Iterable[date] = (),
        archived: bool = False,
    ) -> Habit:
        completions = {day: HabitCompletion(day=day, completed=True) for day in done}
        completions.update({day: HabitCompletion(day=day, completed=False) for day in missed})
        return Habit(
            title=title,
            frequency=frequency,
            start_date=datetime.combine(start, datetime.min.time()),
            end_date=datetime.combine(end, datetime.min.time()) if end else None,
            custom_days=list(custom_days),
            completions=completions,
            archived=archived,
        )

    return _create_habit


@pytest.fixture
def task_factory():
    """Factory for tasks created at a fixed instant."""

    def _create_task(
        title: str = "Task",
        *,
        status: TaskStatus = TaskStatus.TODO,
        priority: TaskPriority = TaskPriority.MEDIUM,
        created_at: datetime = utc(2024, 1, 1, 9),
        completed_at: Optional[datetime] = None,
    ) -> Task:
        return Task(
            title=title,
            status=status,
            priority=priority,
            created_at=created_at,
            updated_at=created_at,
            completed_at=completed_at,
        )

    return _create_task


@pytest.fixture
def block_factory():
    """Factory for time blocks starting at ``start`` and lasting ``minutes``."""

    def _create_block(start: datetime, minutes: int = 60, title: str = "Focus") -> TimeBlock:
        return TimeBlock(title=title, start_time=start, end_time=start + timedelta(minutes=minutes))

    return _create_block


@pytest.fixture
def goal_factory():
    def _create_goal(title: str = "Goal", *, completed: bool = False) -> WeeklyGoal:
        return WeeklyGoal(
            title=title,
            week_start_date=utc(2024, 1, 7),
            completed=completed,
            completed_at=utc(2024, 1, 10) if completed else None,
        )

    return _create_goal
