"""
Data model for the habit calendar.

Summary entries and day details arrive from the habits API as JSON and are
validated here. Calendar days are plain `datetime.date` values normalized to
the canonical calendar timezone.
"""

import datetime as dt
from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from habit_calendar import config


def to_calendar_day(value: dt.date | dt.datetime | str) -> dt.date:
    """
    Normalize a date-like value to a calendar day.

    Aware datetimes (and ISO strings carrying an offset or a trailing "Z") are
    converted into the canonical timezone before the time of day is dropped.
    Naive values are taken as already being in that timezone.

    Args:
        value: A date, datetime, or ISO-8601 string

    Returns:
        The calendar day as a date

    Raises:
        ValueError: If a string cannot be parsed
        TypeError: If the value is not date-like
    """
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return dt.date.fromisoformat(text)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        value = dt.datetime.fromisoformat(text)

    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(config.get_timezone())
        return value.date()

    if isinstance(value, dt.date):
        return value

    raise TypeError(f"Cannot convert {type(value).__name__} to a calendar day")


class SummaryEntry(BaseModel):
    """Habit totals for one day that had at least one habit scheduled."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    date: dt.date
    total_habits: int = Field(..., ge=0, alias="amount")
    completed_habits: int = Field(..., ge=0, alias="completed")

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        return to_calendar_day(value)

    @model_validator(mode="after")
    def _check_counts(self):
        if self.completed_habits > self.total_habits:
            raise ValueError(
                f"completed ({self.completed_habits}) exceeds "
                f"total ({self.total_habits}) on {self.date}"
            )
        return self


def parse_summary(payload: list) -> list[SummaryEntry]:
    """Validate a raw summary payload from the API."""
    return [SummaryEntry.model_validate(item) for item in payload]


class Habit(BaseModel):
    """A habit that can be completed on a day."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str


class DayInfo(BaseModel):
    """Possible and completed habits for a single day."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    possible_habits: tuple[Habit, ...] = Field(default=(), alias="possibleHabits")
    completed_habits: frozenset[str] = Field(
        default=frozenset(), alias="completedHabits"
    )

    @model_validator(mode="after")
    def _check_habits(self):
        ids = [habit.id for habit in self.possible_habits]
        if len(ids) != len(set(ids)):
            raise ValueError("possible habits must have unique ids")

        unknown = self.completed_habits - set(ids)
        if unknown:
            raise ValueError(
                f"completed habits not in possible habits: {', '.join(sorted(unknown))}"
            )
        return self

    @property
    def habit_ids(self) -> set[str]:
        return {habit.id for habit in self.possible_habits}

    def is_completed(self, habit_id: str) -> bool:
        return habit_id in self.completed_habits


class IntensityBand(IntEnum):
    """Completion intensity of a calendar day, lowest to highest."""

    NONE = 0
    VERY_LOW = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    VERY_HIGH = 5


@dataclass(frozen=True)
class CalendarDay:
    """A grid day joined with its summary counts."""

    date: dt.date
    total: int
    completed: int


@dataclass(frozen=True)
class CalendarCell:
    """A joined calendar day with its derived progress markers."""

    date: dt.date
    total: int
    completed: int
    percentage: int
    band: IntensityBand
    is_today: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "total": self.total,
            "completed": self.completed,
            "percentage": self.percentage,
            "band": self.band.name.lower(),
            "level": int(self.band),
            "is_today": self.is_today,
        }
