"""
Configuration management for habit-calendar.

Loads the habits API location and calendar timezone from environment variables.
"""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

HABITS_API_URL = os.getenv("HABITS_API_URL")
HABITS_API_TIMEOUT = float(os.getenv("HABITS_API_TIMEOUT", "10"))
HABITS_TIMEZONE = os.getenv("HABITS_TIMEZONE")

# Grid padding used by the original layout: 18 rows of 5 cells
MINIMUM_GRID_CELLS = 18 * 5


def validate_config():
    """Validate that required configuration is present."""
    missing = []

    if not HABITS_API_URL or HABITS_API_URL == "your_api_url_here":
        missing.append("HABITS_API_URL")

    if missing:
        raise ValueError(
            f"Missing required configuration: {', '.join(missing)}\n"
            "Please copy .env.example to .env and fill in your values."
        )

    if HABITS_TIMEZONE:
        try:
            ZoneInfo(HABITS_TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown HABITS_TIMEZONE: {HABITS_TIMEZONE}")


def get_timezone() -> ZoneInfo | None:
    """
    Return the canonical calendar timezone.

    None means the device-local timezone.
    """
    if not HABITS_TIMEZONE:
        return None
    return ZoneInfo(HABITS_TIMEZONE)
