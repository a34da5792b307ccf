"""
Habits API client for fetching summaries and toggling habit completion.
"""

import logging
import threading
from datetime import date, datetime, time, timezone

import requests

from habit_calendar import config
from habit_calendar.models import DayInfo, SummaryEntry, parse_summary

logger = logging.getLogger(__name__)


class HabitsClientError(Exception):
    """Base exception for habits client errors."""

    pass


class FetchFailed(HabitsClientError):
    """Raised when the summary or a day's habits cannot be loaded."""

    pass


class ToggleFailed(HabitsClientError):
    """Raised when a habit toggle is not acknowledged by the server."""

    pass


class HabitsClient:
    """Client for interacting with the habits API."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        """
        Initialize the habits client.

        Args:
            base_url: Root URL of the habits API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """
        The HTTP session for the calling thread.

        requests.Session is not thread-safe, and toggles run on worker
        threads, so each thread gets its own session.
        """
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update({"Accept": "application/json"})
            self._local.session = session
        return session

    def fetch_summary(self) -> list[SummaryEntry]:
        """
        Fetch the per-day habit summary for the current user.

        Returns:
            Sparse list of summary entries, one per day with habits

        Raises:
            FetchFailed: If the request fails or the payload is invalid
        """
        response = self._request(FetchFailed, "GET", "/summary")

        try:
            summary = parse_summary(response.json())
        except (ValueError, TypeError) as e:
            raise FetchFailed(f"Invalid summary payload: {e}") from e

        logger.debug("Fetched summary with %d entries", len(summary))
        return summary

    def fetch_day(self, day: date) -> DayInfo:
        """
        Fetch possible and completed habits for one day.

        Args:
            day: The calendar day to load

        Returns:
            DayInfo for the day

        Raises:
            FetchFailed: If the request fails or the payload is invalid
        """
        params = {"date": _day_start_utc(day)}
        response = self._request(FetchFailed, "GET", "/day", params=params)

        try:
            day_info = DayInfo.model_validate(response.json())
        except (ValueError, TypeError) as e:
            raise FetchFailed(f"Invalid day payload for {day.isoformat()}: {e}") from e

        logger.debug(
            "Fetched %d habits for %s", len(day_info.possible_habits), day.isoformat()
        )
        return day_info

    def toggle_habit(self, habit_id: str) -> None:
        """
        Flip completion of a habit for today.

        Args:
            habit_id: ID of the habit to toggle

        Raises:
            ToggleFailed: If the server does not acknowledge the toggle
        """
        self._request(ToggleFailed, "PATCH", f"/habits/{habit_id}/toggle")
        logger.debug("Toggled habit %s", habit_id)

    def toggle_habit_for_day(self, habit_id: str) -> None:
        """
        Flip completion of a habit from a day's detail view.

        The server applies the toggle to the current day, which is why
        past days are read-only on the client side.

        Args:
            habit_id: ID of the habit to toggle

        Raises:
            ToggleFailed: If the server does not acknowledge the toggle
        """
        self.toggle_habit(habit_id)

    def _request(
        self,
        error_class: type[HabitsClientError],
        method: str,
        path: str,
        params: dict | None = None,
    ) -> requests.Response:
        """
        Send a request and map failures to the given error class.

        Raises:
            error_class: On network errors or non-2xx responses
        """
        url = f"{self.base_url}{path}"

        try:
            response = self.session.request(
                method, url, params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise error_class(f"Could not reach habits API: {e}") from e

        if response.status_code == 404:
            logger.warning("%s %s returned 404", method, path)
            raise error_class(f"Not found: {path}")
        elif response.status_code >= 500:
            logger.warning("%s %s returned %d", method, path, response.status_code)
            raise error_class(
                f"Habits API server error: {response.status_code}"
            )
        elif not response.ok:
            logger.warning("%s %s returned %d", method, path, response.status_code)
            raise error_class(
                f"Habits API error: {response.status_code} - {response.text}"
            )

        return response


def _day_start_utc(day: date) -> str:
    """
    Midnight of a calendar day in the canonical timezone, as a UTC timestamp.

    The API reads and writes UTC instants, like the summary it returns.
    """
    tz = config.get_timezone()
    if tz is None:
        start = datetime.combine(day, time.min).astimezone()
    else:
        start = datetime.combine(day, time.min, tzinfo=tz)
    return start.astimezone(timezone.utc).isoformat()
