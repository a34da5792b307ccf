"""
Calculate habit completion percentages.
"""

from habit_calendar.models import DayInfo


def percentage(total: int, completed: int) -> int:
    """
    Calculate the completion percentage for a day.

    Args:
        total: Number of habits scheduled (>= 0)
        completed: Number of those habits completed. Not clamped; callers
            guarantee 0 <= completed <= total.

    Returns:
        Percentage rounded half-up to the nearest integer, or 0 when no
        habits are scheduled
    """
    if total == 0:
        return 0

    # Integer form of floor(100 * completed / total + 0.5)
    return (200 * completed + total) // (2 * total)


def day_progress(day_info: DayInfo) -> int:
    """Percentage of a day's possible habits that are completed."""
    return percentage(len(day_info.possible_habits), len(day_info.completed_habits))
