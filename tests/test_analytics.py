"""Tests for the analytics aggregator."""

from __future__ import annotations

import json
from datetime import date, timedelta

from conftest import assert_float_equal, utc

from kairo.models import Task, TaskPriority, TaskStatus, TimeBlock
from kairo.services.analytics import (
    calculate_analytics,
    calculate_goal_stats,
    calculate_habit_stats,
    calculate_task_stats,
    calculate_time_stats,
)

AS_OF = date(2024, 1, 7)


def _run(start: date, count: int) -> list[date]:
    return [start + timedelta(days=offset) for offset in range(count)]


class TestTaskStats:
    def test_counts_by_status(self, task_factory):
        tasks = (
            [task_factory(status=TaskStatus.COMPLETED, completed_at=utc(2024, 1, 1, 11)) for _ in range(4)]
            + [task_factory(status=TaskStatus.IN_PROGRESS) for _ in range(3)]
            + [task_factory(status=TaskStatus.TODO) for _ in range(3)]
        )
        stats = calculate_task_stats(tasks)
        assert stats.total == 10
        assert stats.completed == 4
        assert stats.in_progress == 3
        assert stats.todo == 3
        assert_float_equal(stats.completion_rate, 40.0)

    def test_empty_collection(self):
        stats = calculate_task_stats([])
        assert stats.total == 0
        assert stats.completion_rate == 0.0
        assert stats.average_completion_time == 0.0
        assert (stats.by_priority.high, stats.by_priority.medium, stats.by_priority.low) == (0, 0, 0)

    def test_average_completion_time_in_hours(self, task_factory):
        tasks = [
            task_factory(status=TaskStatus.COMPLETED, completed_at=utc(2024, 1, 1, 11)),
            task_factory(status=TaskStatus.COMPLETED, completed_at=utc(2024, 1, 1, 13)),
            task_factory(status=TaskStatus.COMPLETED),
            task_factory(status=TaskStatus.TODO, completed_at=utc(2024, 1, 5)),
        ]
        assert_float_equal(calculate_task_stats(tasks).average_completion_time, 3.0)

    def test_timestamps_without_offset_are_read_as_utc(self):
        task = Task(
            title="Report",
            status=TaskStatus.COMPLETED,
            created_at="2024-01-05T08:00:00Z",
            completed_at="2024-01-05T10:00:00",
        )
        assert task.completed_at.tzinfo is not None
        assert_float_equal(calculate_task_stats([task]).average_completion_time, 2.0)

    def test_default_created_at_mixes_with_naive_completion(self):
        task = Task(title="Report", status=TaskStatus.COMPLETED, completed_at="2024-01-05T10:00:00")
        stats = calculate_task_stats([task])
        assert stats.completed == 1

    def test_priority_breakdown(self, task_factory):
        tasks = [
            task_factory(priority=TaskPriority.HIGH),
            task_factory(priority=TaskPriority.HIGH),
            task_factory(priority=TaskPriority.LOW),
        ]
        breakdown = calculate_task_stats(tasks).by_priority
        assert (breakdown.high, breakdown.medium, breakdown.low) == (2, 0, 1)


class TestHabitStats:
    def test_empty_collection(self):
        stats = calculate_habit_stats([], as_of=AS_OF)
        assert stats.total == 0
        assert stats.streaks.current == 0
        assert stats.streaks.longest == 0
        assert stats.completion_rate == 0.0
        assert stats.most_consistent is None
        assert stats.least_consistent is None

    def test_active_and_archived_counts(self, habit_factory):
        habits = [habit_factory(), habit_factory(archived=True), habit_factory()]
        stats = calculate_habit_stats(habits, as_of=AS_OF)
        assert (stats.total, stats.active, stats.archived) == (3, 2, 1)

    def test_average_current_streak_rounds_half_up(self, habit_factory):
        habits = [habit_factory(done=_run(date(2024, 1, 5), 3)), habit_factory()]
        assert calculate_habit_stats(habits, as_of=AS_OF).streaks.current == 2

    def test_longest_is_best_across_habits(self, habit_factory):
        habits = [
            habit_factory(done=_run(date(2024, 1, 1), 2)),
            habit_factory(done=_run(date(2024, 1, 2), 5)),
        ]
        assert calculate_habit_stats(habits, as_of=AS_OF).streaks.longest == 5

    def test_completion_rate_is_mean_of_habits(self, habit_factory):
        habits = [
            habit_factory(done=_run(date(2024, 1, 1), 7)),
            habit_factory(start=date(2024, 1, 8)),
        ]
        assert_float_equal(calculate_habit_stats(habits, as_of=AS_OF).completion_rate, 50.0)

    def test_most_and_least_consistent(self, habit_factory):
        best = habit_factory("Best", done=_run(date(2024, 1, 1), 7))
        middling = habit_factory("Middling", done=_run(date(2024, 1, 1), 3))
        untouched = habit_factory("Untouched")
        stats = calculate_habit_stats([untouched, middling, best], as_of=AS_OF)
        assert stats.most_consistent == best.id
        # Habits without any ledger record never count as least consistent.
        assert stats.least_consistent == middling.id

    def test_zero_rate_habit_is_never_most_consistent(self, habit_factory):
        habit = habit_factory(missed=[date(2024, 1, 3)])
        stats = calculate_habit_stats([habit], as_of=AS_OF)
        assert stats.most_consistent is None
        assert stats.least_consistent == habit.id

    def test_perfect_habit_is_never_least_consistent(self, habit_factory):
        habit = habit_factory(done=_run(date(2024, 1, 1), 7))
        stats = calculate_habit_stats([habit], as_of=AS_OF)
        assert stats.most_consistent == habit.id
        assert stats.least_consistent is None

    def test_ties_go_to_the_first_habit(self, habit_factory):
        first = habit_factory("First", done=_run(date(2024, 1, 1), 7))
        second = habit_factory("Second", done=_run(date(2024, 1, 1), 7))
        assert calculate_habit_stats([first, second], as_of=AS_OF).most_consistent == first.id


class TestTimeStats:
    def test_empty_collection(self):
        stats = calculate_time_stats([])
        assert stats.total_time_blocks == 0
        assert stats.total_hours == 0.0
        assert stats.average_block_length == 0.0
        assert stats.most_productive_day == "Sunday"
        assert stats.most_productive_time == "0:00 - 1:00"

    def test_totals_and_busiest_slots(self, block_factory):
        blocks = [
            block_factory(utc(2024, 1, 1, 9), 60),  # Monday
            block_factory(utc(2024, 1, 1, 14), 120),  # Monday
            block_factory(utc(2024, 1, 2, 9), 30),  # Tuesday
        ]
        stats = calculate_time_stats(blocks)
        assert stats.total_time_blocks == 3
        assert_float_equal(stats.total_hours, 3.5)
        assert_float_equal(stats.average_block_length, 70.0)
        assert stats.most_productive_day == "Monday"
        assert stats.most_productive_time == "9:00 - 10:00"

    def test_mixed_offset_and_naive_block(self):
        block = TimeBlock(
            title="Focus", start_time="2024-01-05T09:00:00Z", end_time="2024-01-05T10:00:00"
        )
        stats = calculate_time_stats([block])
        assert_float_equal(stats.total_hours, 1.0)
        assert stats.most_productive_day == "Friday"

    def test_ties_go_to_earliest_weekday_and_hour(self, block_factory):
        blocks = [
            block_factory(utc(2024, 1, 6, 15)),  # Saturday
            block_factory(utc(2024, 1, 7, 8)),  # Sunday
        ]
        stats = calculate_time_stats(blocks)
        assert stats.most_productive_day == "Sunday"
        assert stats.most_productive_time == "8:00 - 9:00"


class TestGoalStats:
    def test_completion_rate(self, goal_factory):
        goals = [goal_factory(completed=True), goal_factory(), goal_factory()]
        stats = calculate_goal_stats(goals)
        assert (stats.total, stats.completed) == (3, 1)
        assert_float_equal(stats.completion_rate, 100 / 3)

    def test_empty_collection(self):
        stats = calculate_goal_stats([])
        assert (stats.total, stats.completed, stats.completion_rate) == (0, 0, 0.0)


class TestCalculateAnalytics:
    def test_composes_every_section(self, task_factory, habit_factory, block_factory, goal_factory):
        now = utc(2024, 1, 7, 20)
        state = calculate_analytics(
            [task_factory(status=TaskStatus.COMPLETED, completed_at=utc(2024, 1, 2))],
            [habit_factory(done=_run(date(2024, 1, 5), 3))],
            [block_factory(utc(2024, 1, 3, 10))],
            [goal_factory(completed=True)],
            as_of=AS_OF,
            now=now,
        )
        assert state.task_stats.completed == 1
        assert state.habit_stats.streaks.current == 3
        assert state.time_stats.most_productive_day == "Wednesday"
        assert state.goal_stats.completion_rate == 100.0
        assert state.last_updated == now

    def test_to_dict_is_json_serializable(self):
        state = calculate_analytics([], [], [], [], now=utc(2024, 1, 7))
        data = json.loads(json.dumps(state.to_dict()))
        assert set(data) == {"task_stats", "habit_stats", "time_stats", "goal_stats", "last_updated"}
        assert data["last_updated"] == "2024-01-07T00:00:00+00:00"
        assert data["habit_stats"]["streaks"] == {"current": 0, "longest": 0}
