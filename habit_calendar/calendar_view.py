"""
State holder for the yearly calendar screen.
"""

import logging
from datetime import date
from typing import Callable

from habit_calendar.date_grid import current_day, filler_count, generate_year_grid
from habit_calendar.habits_client import FetchFailed, HabitsClient, ToggleFailed
from habit_calendar.models import CalendarCell
from habit_calendar.summary_joiner import build_calendar

logger = logging.getLogger(__name__)


class CalendarView:
    """
    Calendar cells for the current year, refreshed from the habits API.

    The summary is re-fetched on every refresh and the grid is regenerated
    from the clock each time, so a change of calendar day is picked up.
    """

    def __init__(self, client: HabitsClient, clock: Callable[[], date] | None = None):
        """
        Initialize the view.

        Args:
            client: Habits API client
            clock: Callable returning today's calendar day. Defaults to
                current_day().
        """
        self.client = client
        self.clock = clock or current_day
        self.cells: list[CalendarCell] = []
        self.filler_count = 0
        self.loaded = False

    def refresh(self) -> list[CalendarCell]:
        """
        Fetch the summary and rebuild the calendar cells.

        Returns:
            The rebuilt cells

        Raises:
            FetchFailed: If the summary cannot be loaded. Previously loaded
                cells are kept.
        """
        today = self.clock()

        try:
            summary = self.client.fetch_summary()
        except FetchFailed:
            logger.warning("Could not load habit summary, keeping previous calendar")
            raise

        grid = generate_year_grid(today)
        self.cells = build_calendar(grid, summary, today=today)
        self.filler_count = filler_count(grid)
        self.loaded = True
        return self.cells

    def toggle_today(self, habit_id: str) -> list[CalendarCell]:
        """
        Toggle a habit for today and refresh the calendar.

        Raises:
            ToggleFailed: If the toggle is rejected; the cells are unchanged
            FetchFailed: If the toggle succeeded but the refresh failed
        """
        try:
            self.client.toggle_habit(habit_id)
        except ToggleFailed:
            logger.warning("Toggle of habit %s for today failed", habit_id)
            raise

        return self.refresh()

    def cell_for(self, day: date) -> CalendarCell | None:
        """Return the cell for a calendar day, if it is on the grid."""
        for cell in self.cells:
            if cell.date == day:
                return cell
        return None
