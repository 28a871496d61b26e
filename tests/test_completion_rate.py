"""Tests for completion rate and due-day helpers."""

from __future__ import annotations

from datetime import date, timedelta

from conftest import assert_float_equal

from kairo.models import HabitFrequency
from kairo.services.habits import completion_rate, due_days, habit_progress


class TestCompletionRate:
    def test_weekly_habit_completed_every_due_day(self, habit_factory):
        habit = habit_factory(
            frequency=HabitFrequency.WEEKLY,
            start=date(2024, 1, 1),
            done=[date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15)],
        )
        assert_float_equal(completion_rate(habit, as_of=date(2024, 1, 21)), 100.0)

    def test_daily_habit_half_done(self, habit_factory):
        habit = habit_factory(done=[date(2024, 1, 1) + timedelta(days=i) for i in range(5)])
        assert_float_equal(completion_rate(habit, as_of=date(2024, 1, 10)), 50.0)

    def test_as_of_before_start_is_zero(self, habit_factory):
        habit = habit_factory(start=date(2024, 2, 1))
        assert completion_rate(habit, as_of=date(2024, 1, 15)) == 0.0

    def test_no_due_days_is_zero(self, habit_factory):
        habit = habit_factory(frequency=HabitFrequency.CUSTOM, done=[date(2024, 1, 2)])
        assert completion_rate(habit, as_of=date(2024, 1, 31)) == 0.0

    def test_completion_on_non_due_day_does_not_count(self, habit_factory):
        habit = habit_factory(frequency=HabitFrequency.WEEKLY, done=[date(2024, 1, 2)])
        assert completion_rate(habit, as_of=date(2024, 1, 7)) == 0.0

    def test_missed_records_are_not_completions(self, habit_factory):
        habit = habit_factory(done=[date(2024, 1, 1)], missed=[date(2024, 1, 2)])
        assert_float_equal(completion_rate(habit, as_of=date(2024, 1, 2)), 50.0)

    def test_end_date_bounds_the_window(self, habit_factory):
        days = [date(2024, 1, 1) + timedelta(days=i) for i in range(5)]
        habit = habit_factory(end=date(2024, 1, 5), done=days)
        assert_float_equal(completion_rate(habit, as_of=date(2024, 1, 31)), 100.0)

    def test_rate_stays_within_bounds(self, habit_factory):
        habits = [
            habit_factory(done=[date(2024, 1, 3)]),
            habit_factory(frequency=HabitFrequency.MONTHLY, done=[date(2024, 1, 1)]),
            habit_factory(frequency=HabitFrequency.CUSTOM, custom_days=[0, 6]),
        ]
        for habit in habits:
            assert 0.0 <= completion_rate(habit, as_of=date(2024, 3, 1)) <= 100.0


class TestDueDays:
    def test_weekly_due_days(self, habit_factory):
        habit = habit_factory(frequency=HabitFrequency.WEEKLY)
        assert due_days(habit, date(2024, 1, 1), date(2024, 1, 21)) == [
            date(2024, 1, 1),
            date(2024, 1, 8),
            date(2024, 1, 15),
        ]


class TestHabitProgress:
    def test_collects_list_view_figures(self, habit_factory):
        habit = habit_factory(done=[date(2024, 1, 3), date(2024, 1, 4)])
        progress = habit_progress(habit, as_of=date(2024, 1, 4))
        assert progress.habit_id == habit.id
        assert progress.due is True
        assert progress.status.completed is True
        assert progress.current_streak == 2
        assert progress.longest_streak == 2
        assert_float_equal(progress.completion_rate, 50.0)
