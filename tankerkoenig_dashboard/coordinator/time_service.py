"""
TimeService - Centralized time management for the dashboard.

This service provides:
1. Single source of truth for current time
2. Age and deadline helpers for the refresh cycle
3. Local-time formatting for the page
4. Time-travel capability (inject simulated time for testing)

The coordinator and the API client take "now" from here, so tests can drive
many refresh cycles without waiting on the wall clock.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from tankerkoenig_dashboard.const import DEFAULT_TIMEZONE, TIMESTAMP_PLACEHOLDER

_DISPLAY_FORMAT = "%d.%m.%Y %H:%M"


class TankerkoenigTimeService:
    """
    Centralized time service.

    Without a reference time, now() follows the real clock (UTC). With a
    reference time, now() is frozen until advance() moves it.

    Usage:
        # Real clock
        time_service = TankerkoenigTimeService()

        # Simulated clock for tests
        time_service = TankerkoenigTimeService(datetime(2025, 11, 22, 14, 0, tzinfo=UTC))
        time_service.advance(timedelta(seconds=60))
    """

    def __init__(
        self,
        reference_time: datetime | None = None,
        display_timezone: str = DEFAULT_TIMEZONE,
    ) -> None:
        """
        Initialize TimeService.

        Args:
            reference_time: Optional fixed time. If None, uses actual current time.
            display_timezone: IANA name used by format_local().

        """
        self._reference_time = reference_time
        self._display_tz = ZoneInfo(display_timezone)

    def now(self) -> datetime:
        """Get current time (timezone-aware)."""
        if self._reference_time is not None:
            return self._reference_time
        return datetime.now(UTC)

    def advance(self, delta: timedelta) -> datetime:
        """
        Move a simulated clock forward.

        Starts from the current real time if the clock was not simulated yet.

        Returns:
            The new reference time.

        """
        self._reference_time = self.now() + delta
        return self._reference_time

    def age_of(self, dt: datetime) -> timedelta:
        """Return how long ago dt was, relative to now()."""
        return self.now() - dt

    def as_local(self, dt: datetime) -> datetime:
        """Convert datetime to the display timezone."""
        return dt.astimezone(self._display_tz)

    def format_local(self, dt: datetime | None) -> str:
        """
        Format a timestamp for the page ("22.11.2025 15:00").

        Returns the placeholder "–" for None.
        """
        if dt is None:
            return TIMESTAMP_PLACEHOLDER
        return self.as_local(dt).strftime(_DISPLAY_FORMAT)
