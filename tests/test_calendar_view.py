"""
Tests for the calendar view module.
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from habit_calendar.calendar_view import CalendarView
from habit_calendar.habits_client import FetchFailed, ToggleFailed
from habit_calendar.models import IntensityBand, SummaryEntry


@pytest.fixture
def client():
    client = MagicMock()
    client.fetch_summary.return_value = [
        SummaryEntry(id="s1", date="2026-01-05", total_habits=4, completed_habits=2),
    ]
    return client


class TestCalendarView:
    """Tests for the CalendarView class."""

    def test_starts_empty(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))

        assert view.cells == []
        assert not view.loaded
        client.fetch_summary.assert_not_called()

    def test_refresh_builds_cells(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))
        cells = view.refresh()

        assert view.loaded
        assert len(cells) == 10
        assert view.filler_count == 80
        assert cells[4].band == IntensityBand.MEDIUM
        assert cells[-1].is_today

    def test_refresh_failure_keeps_previous_cells(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))
        previous = view.refresh()

        client.fetch_summary.side_effect = FetchFailed("offline")

        with pytest.raises(FetchFailed):
            view.refresh()

        assert view.cells == previous
        assert view.filler_count == 80

    def test_refresh_picks_up_day_change(self, client):
        days = iter([date(2026, 1, 10), date(2026, 1, 11)])
        view = CalendarView(client, clock=lambda: next(days))

        view.refresh()
        assert len(view.cells) == 10

        view.refresh()
        assert len(view.cells) == 11
        assert view.cells[-1].is_today
        assert not view.cells[-2].is_today

    def test_refresh_refetches_summary(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))
        view.refresh()
        view.refresh()

        assert client.fetch_summary.call_count == 2

    def test_toggle_today_refreshes(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))
        view.refresh()

        client.fetch_summary.return_value = [
            SummaryEntry(id="s2", date="2026-01-10", total_habits=2, completed_habits=2),
        ]
        view.toggle_today("h1")

        client.toggle_habit.assert_called_once_with("h1")
        assert view.cells[-1].band == IntensityBand.VERY_HIGH

    def test_toggle_today_failure_leaves_cells(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))
        previous = view.refresh()
        client.toggle_habit.side_effect = ToggleFailed("server error")

        with pytest.raises(ToggleFailed):
            view.toggle_today("h1")

        assert view.cells == previous
        assert client.fetch_summary.call_count == 1

    def test_cell_for(self, client):
        view = CalendarView(client, clock=lambda: date(2026, 1, 10))
        view.refresh()

        assert view.cell_for(date(2026, 1, 5)).total == 4
        assert view.cell_for(date(2025, 12, 31)) is None
