"""
FastAPI web application for habit-calendar.

Provides REST API endpoints for the yearly calendar and day details.
"""

from datetime import date

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from habit_calendar.config import HABITS_API_TIMEOUT, HABITS_API_URL, validate_config
from habit_calendar.date_grid import current_day, is_date_in_past
from habit_calendar.habits_client import HabitsClient, HabitsClientError
from habit_calendar.progress_calculator import day_progress
from habit_calendar.summary_joiner import calculate_calendar

app = FastAPI(
    title="habit-calendar",
    description="Yearly habit completion calendar",
    version="0.1.0",
)


class HabitOut(BaseModel):
    """A habit as listed in a day's details."""

    id: str
    title: str
    completed: bool


class DayOut(BaseModel):
    """Response model for a day's habits."""

    date: str
    habits: list[HabitOut]
    completed_habits: list[str]
    progress: int = Field(..., ge=0, le=100, description="Completion percentage")
    editable: bool


def _get_client() -> HabitsClient:
    """
    Create a habits API client from configuration.

    Raises:
        HTTPException: on configuration errors
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    return HabitsClient(HABITS_API_URL, timeout=HABITS_API_TIMEOUT)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/calendar")
def get_calendar():
    """
    Get the year-to-date calendar with per-day completion intensity.

    Returns:
        JSON with days, period and filler_count
    """
    client = _get_client()

    try:
        summary = client.fetch_summary()
    except HabitsClientError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return calculate_calendar(summary)


@app.get("/api/day", response_model=DayOut)
def get_day(day: date = Query(..., alias="date")):
    """
    Get possible and completed habits for a day.

    Returns:
        JSON with habits, progress and whether the day can still be edited
    """
    client = _get_client()

    try:
        day_info = client.fetch_day(day)
    except HabitsClientError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return DayOut(
        date=day.isoformat(),
        habits=[
            HabitOut(id=habit.id, title=habit.title, completed=day_info.is_completed(habit.id))
            for habit in day_info.possible_habits
        ],
        completed_habits=sorted(day_info.completed_habits),
        progress=day_progress(day_info),
        editable=not is_date_in_past(day, current_day()),
    )


@app.patch("/api/habits/{habit_id}/toggle")
def toggle_habit(habit_id: str):
    """
    Toggle a habit's completion for today.

    Returns:
        JSON with the toggled habit id
    """
    client = _get_client()

    try:
        client.toggle_habit(habit_id)
    except HabitsClientError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {"habit_id": habit_id, "toggled": True}
