"""
Intensity classification for calendar heatmap cells.
"""

from datetime import date

from habit_calendar.date_grid import current_day
from habit_calendar.models import IntensityBand


def classify(percentage: float) -> IntensityBand:
    """
    Map a completion percentage to an intensity band.

    Lower bounds are closed, so a boundary value belongs to the higher band.

    Args:
        percentage: Completion percentage, 0-100

    Returns:
        IntensityBand:
            NONE: 0%
            VERY_LOW: under 20%
            LOW: 20-39%
            MEDIUM: 40-59%
            HIGH: 60-79%
            VERY_HIGH: 80% and above
    """
    if percentage == 0:
        return IntensityBand.NONE
    elif percentage < 20:
        return IntensityBand.VERY_LOW
    elif percentage < 40:
        return IntensityBand.LOW
    elif percentage < 60:
        return IntensityBand.MEDIUM
    elif percentage < 80:
        return IntensityBand.HIGH
    else:
        return IntensityBand.VERY_HIGH


def is_today(day: date, today: date | None = None) -> bool:
    """Check whether a calendar day is the current day."""
    if today is None:
        today = current_day()
    return day == today
