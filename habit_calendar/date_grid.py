"""
Date grid generation for the yearly habit calendar.

Produces the dense, gap-free run of calendar days from January 1 through
today that the heatmap is drawn from.
"""

from datetime import date, datetime, timedelta

from habit_calendar import config
from habit_calendar.models import to_calendar_day


def current_day() -> date:
    """Return today's calendar day in the canonical timezone."""
    return datetime.now(config.get_timezone()).date()


def generate_year_grid(reference_now: date | datetime | str | None = None) -> list[date]:
    """
    Generate every calendar day of the reference year up to the reference day.

    Args:
        reference_now: The instant treated as "now". Accepts anything
            to_calendar_day() accepts. Defaults to the current day.

    Returns:
        Ascending list of dates from January 1 through the reference day,
        inclusive. Its length equals the day of the year.
    """
    if reference_now is None:
        end = current_day()
    else:
        end = to_calendar_day(reference_now)

    start = end.replace(month=1, day=1)
    total_days = (end - start).days + 1

    return [start + timedelta(days=i) for i in range(total_days)]


def filler_count(grid: list[date], minimum_cells: int = config.MINIMUM_GRID_CELLS) -> int:
    """
    Number of placeholder cells needed to pad the grid to a minimum size.

    Args:
        grid: Output of generate_year_grid()
        minimum_cells: Minimum number of cells the calendar shows

    Returns:
        Padding count, never negative
    """
    return max(0, minimum_cells - len(grid))


def is_date_in_past(day: date, today: date | None = None) -> bool:
    """
    Check whether a day ended before today began.

    Habits of past days are read-only.
    """
    if today is None:
        today = current_day()
    return day < today
