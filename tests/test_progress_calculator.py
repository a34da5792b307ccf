"""
Tests for the progress calculator module.
"""

from habit_calendar.models import DayInfo, Habit
from habit_calendar.progress_calculator import day_progress, percentage


class TestPercentage:
    """Tests for the percentage function."""

    def test_zero_total_is_zero(self):
        """No habits scheduled means zero progress, not an error."""
        assert percentage(0, 0) == 0

    def test_exact_quarters(self):
        assert percentage(4, 1) == 25
        assert percentage(4, 3) == 75

    def test_rounds_down_below_half(self):
        """1/3 is 33.33...% and rounds to 33."""
        assert percentage(3, 1) == 33

    def test_rounds_up_above_half(self):
        """2/3 is 66.66...% and rounds to 67."""
        assert percentage(3, 2) == 67

    def test_half_rounds_up(self):
        """Exact halves round up, not to even."""
        assert percentage(2, 1) == 50
        assert percentage(8, 1) == 13  # 12.5
        assert percentage(40, 1) == 3  # 2.5

    def test_all_completed(self):
        assert percentage(5, 5) == 100

    def test_none_completed(self):
        assert percentage(5, 0) == 0

    def test_completed_is_not_clamped(self):
        """Values outside the valid range pass through unchanged."""
        assert percentage(2, 3) == 150


class TestDayProgress:
    """Tests for the day_progress function."""

    def test_empty_day_is_zero(self):
        assert day_progress(DayInfo()) == 0

    def test_counts_completed_habits(self):
        day_info = DayInfo(
            possible_habits=[
                Habit(id="a", title="Read"),
                Habit(id="b", title="Run"),
                Habit(id="c", title="Sleep early"),
            ],
            completed_habits={"a"},
        )
        assert day_progress(day_info) == 33
