"""
Confirmed habit toggles for a single day view.

A day's completion state only changes after the server acknowledges the
toggle, so there is never a visible-then-reverted intermediate state.
"""

import asyncio
import logging
from collections import defaultdict
from datetime import date

from habit_calendar.date_grid import current_day, is_date_in_past
from habit_calendar.habits_client import HabitsClient, ToggleFailed
from habit_calendar.models import DayInfo
from habit_calendar.progress_calculator import day_progress

logger = logging.getLogger(__name__)


def apply_confirmed_toggle(day_info: DayInfo, habit_id: str) -> DayInfo:
    """
    Flip membership of a habit in the day's completed set.

    Args:
        day_info: State before the toggle
        habit_id: ID of a habit listed in day_info.possible_habits

    Returns:
        New DayInfo with habit_id added if it was absent, removed if present

    Raises:
        ValueError: If habit_id is not one of the day's possible habits
    """
    if habit_id not in day_info.habit_ids:
        raise ValueError(f"Habit '{habit_id}' is not a possible habit for this day")

    return day_info.model_copy(
        update={"completed_habits": day_info.completed_habits ^ {habit_id}}
    )


class DayReconciler:
    """Holds one day's habits and applies toggles once the server confirms them."""

    def __init__(
        self,
        client: HabitsClient,
        day: date,
        day_info: DayInfo,
        today: date | None = None,
    ):
        """
        Initialize the reconciler.

        Args:
            client: Habits API client used for toggles
            day: The calendar day being viewed
            day_info: Habits fetched for that day
            today: Override for today's date (for testing)
        """
        self.client = client
        self.day = day
        self.day_info = day_info
        self.today = today if today is not None else current_day()
        self._locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    @classmethod
    async def load(
        cls, client: HabitsClient, day: date, today: date | None = None
    ) -> "DayReconciler":
        """
        Fetch a day's habits and build a reconciler for them.

        Raises:
            FetchFailed: If the day cannot be loaded
        """
        day_info = await asyncio.to_thread(client.fetch_day, day)
        return cls(client, day, day_info, today=today)

    @property
    def editable(self) -> bool:
        """Past days are read-only."""
        return not is_date_in_past(self.day, self.today)

    @property
    def progress(self) -> int:
        return day_progress(self.day_info)

    async def toggle(self, habit_id: str) -> DayInfo:
        """
        Toggle a habit and apply the change after the server confirms it.

        Toggles of different habits may run concurrently. Toggles of the same
        habit are sent one at a time, in call order.

        Args:
            habit_id: ID of one of the day's possible habits

        Returns:
            The updated DayInfo

        Raises:
            ValueError: If habit_id is not a possible habit for the day
            ToggleFailed: If the day is read-only or the server rejects the
                toggle. day_info is left unchanged.
        """
        if habit_id not in self.day_info.habit_ids:
            raise ValueError(f"Habit '{habit_id}' is not a possible habit for this day")

        if not self.editable:
            raise ToggleFailed(
                f"Habits for {self.day.isoformat()} can no longer be edited"
            )

        async with self._locks[habit_id]:
            try:
                await asyncio.to_thread(self.client.toggle_habit_for_day, habit_id)
            except ToggleFailed:
                logger.warning(
                    "Toggle of habit %s on %s failed", habit_id, self.day.isoformat()
                )
                raise

            # Flip against the latest state so concurrent toggles of other
            # habits are not lost.
            self.day_info = apply_confirmed_toggle(self.day_info, habit_id)

        return self.day_info
