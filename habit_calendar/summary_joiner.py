"""
Join the dense date grid with the sparse habit summary.

The summary only has entries for days with scheduled habits; every grid day
gets a row regardless, and rows carry the derived intensity for heatmap
display.
"""

from datetime import date

from habit_calendar.date_grid import current_day, filler_count, generate_year_grid
from habit_calendar.intensity import classify, is_today
from habit_calendar.models import CalendarCell, CalendarDay, SummaryEntry
from habit_calendar.progress_calculator import percentage


def join(grid: list[date], summary: list[SummaryEntry]) -> list[CalendarDay]:
    """
    Match each grid day against the summary by calendar-day identity.

    Args:
        grid: Ordered calendar days, as produced by generate_year_grid()
        summary: Sparse summary entries, in any order

    Returns:
        One CalendarDay per grid day, in grid order. Days without an entry
        have total=0 and completed=0.
    """
    # Entry dates are already normalized to calendar days at validation time.
    # A later entry for the same day replaces an earlier one.
    entries_by_day = {entry.date: entry for entry in summary}

    rows = []
    for day in grid:
        entry = entries_by_day.get(day)
        if entry is None:
            rows.append(CalendarDay(date=day, total=0, completed=0))
        else:
            rows.append(
                CalendarDay(
                    date=day,
                    total=entry.total_habits,
                    completed=entry.completed_habits,
                )
            )

    return rows


def build_calendar(
    grid: list[date],
    summary: list[SummaryEntry],
    today: date | None = None,
) -> list[CalendarCell]:
    """
    Join the grid with the summary and classify each day.

    Args:
        grid: Ordered calendar days
        summary: Sparse summary entries
        today: Override for today's date (for testing)

    Returns:
        One CalendarCell per grid day, in grid order
    """
    if today is None:
        today = current_day()

    cells = []
    for row in join(grid, summary):
        day_percentage = percentage(row.total, row.completed)
        cells.append(
            CalendarCell(
                date=row.date,
                total=row.total,
                completed=row.completed,
                percentage=day_percentage,
                band=classify(day_percentage),
                is_today=is_today(row.date, today),
            )
        )

    return cells


def calculate_calendar(
    summary: list[SummaryEntry],
    today: date | None = None,
) -> dict:
    """
    Calculate the year-to-date calendar for heatmap display.

    Args:
        summary: Sparse summary entries from the habits API
        today: Override for today's date (for testing)

    Returns:
        Dictionary with:
            - days: List of cell dicts (date, total, completed, percentage,
              band, level, is_today)
            - period: Start/end dates and total days
            - filler_count: Placeholder cells needed to pad the grid
    """
    if today is None:
        today = current_day()

    grid = generate_year_grid(today)
    cells = build_calendar(grid, summary, today=today)

    return {
        "days": [cell.to_dict() for cell in cells],
        "period": {
            "start": grid[0].isoformat(),
            "end": today.isoformat(),
            "total_days": len(grid),
        },
        "filler_count": filler_count(grid),
    }
