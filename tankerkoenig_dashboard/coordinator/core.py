"""Refresh coordinator keeping the station price current."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from tankerkoenig_dashboard.api import TankerkoenigApiClientError
from tankerkoenig_dashboard.config import TankerkoenigConfigMissingError
from tankerkoenig_dashboard.data import PriceReading, ReadingStatus

from .constants import FETCH_TIMEOUT, LOG_PREFIX_LENGTH, UPDATE_INTERVAL
from .time_service import TankerkoenigTimeService

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import datetime, timedelta

    from tankerkoenig_dashboard.config import DashboardConfig

    from .store import PriceStore

_LOGGER = logging.getLogger(__name__)


class CoordinatorState(StrEnum):
    """Refresh loop state."""

    IDLE = "idle"
    FETCHING = "fetching"


class PriceFetcher(Protocol):
    """Anything that can look up one station's current price."""

    async def async_fetch(self, station_id: str, api_key: str) -> PriceReading:
        """Return a FRESH reading or raise TankerkoenigApiClientError."""
        ...


# =============================================================================
# REFRESH CYCLE
# =============================================================================
#
# Unconfigured (API key or station id missing):
#   - async_start() returns None, no task is created
#   - State stays IDLE, store stays UNCONFIGURED, no request is ever made
#
# Configured:
#   - First fetch runs immediately so the first page view has data
#   - Then one fetch per UPDATE_INTERVAL (sleep is injectable)
#   - IDLE -> FETCHING -> IDLE around every fetch
#
# Fetch success: FRESH reading replaces the stored one
# Fetch failure: UNAVAILABLE reading, keeping the last known price, name and
#   observed_at; placeholder name and no price if nothing ever succeeded.
#   The failure is logged and kept in last_exception, never re-raised.
#   The next tick is the retry, there is no backoff.
#
# =============================================================================


class TankerkoenigRefreshCoordinator:
    """Periodically fetches the station price and writes it to the store."""

    def __init__(
        self,
        store: PriceStore,
        config: DashboardConfig,
        fetcher: PriceFetcher | None,
        *,
        time: TankerkoenigTimeService | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        update_interval: timedelta = UPDATE_INTERVAL,
        fetch_timeout: timedelta = FETCH_TIMEOUT,
    ) -> None:
        """Initialize the coordinator."""
        self.store = store
        self.fetcher = fetcher
        self.update_interval = update_interval
        self._fetch_timeout = fetch_timeout
        self._sleep = sleep

        # Single source of truth for "now", shared with the API client
        self.time = time or TankerkoenigTimeService(display_timezone=config.timezone)
        if fetcher is not None and hasattr(fetcher, "time"):
            fetcher.time = self.time

        self.state = CoordinatorState.IDLE
        self.last_exception: Exception | None = None
        self.last_attempt: datetime | None = None
        self._task: asyncio.Task[None] | None = None

        try:
            self._credentials: tuple[str, str] | None = config.require_credentials()
        except TankerkoenigConfigMissingError as error:
            self._credentials = None
            self._log_prefix = "[unconfigured]"
            self._log("info", "Price fetching disabled: %s", error)
        else:
            self._log_prefix = f"[{self._credentials[0][:LOG_PREFIX_LENGTH]}]"

    def _log(self, level: str, message: str, *args: object, **kwargs: object) -> None:
        """Log with coordinator-specific prefix."""
        prefixed_message = f"{self._log_prefix} {message}"
        getattr(_LOGGER, level)(prefixed_message, *args, **kwargs)

    @property
    def is_enabled(self) -> bool:
        """Return True if credentials and a fetcher are available."""
        return self._credentials is not None and self.fetcher is not None

    @property
    def is_running(self) -> bool:
        """Return True while the background task is alive."""
        return self._task is not None and not self._task.done()

    def async_start(self) -> asyncio.Task[None] | None:
        """
        Start the background refresh task.

        Returns:
            The task, or None when fetching is disabled (unconfigured).

        """
        if not self.is_enabled:
            self._log("debug", "Not starting refresh loop, showing placeholder data")
            return None

        if self.is_running:
            return self._task

        self._log("info", "Starting refresh loop (interval %s)", self.update_interval)
        self._task = asyncio.create_task(self.async_run(), name="tankerkoenig_refresh")
        return self._task

    async def async_run(self, max_cycles: int | None = None) -> None:
        """
        Run the refresh loop in the current task.

        Args:
            max_cycles: Stop after this many fetches. None runs until cancelled.

        """
        if not self.is_enabled:
            return

        cycles = 0
        while True:
            await self.async_refresh()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                return
            await self._sleep(self.update_interval.total_seconds())

    async def async_refresh(self) -> PriceReading:
        """
        Run one fetch and store its outcome.

        Never raises for fetch failures. Returns the reading now in the store.
        """
        if not self.is_enabled or self._credentials is None or self.fetcher is None:
            return self.store.read()

        station_id, api_key = self._credentials
        self.state = CoordinatorState.FETCHING
        self.last_attempt = self.time.now()

        try:
            async with asyncio.timeout(self._fetch_timeout.total_seconds()):
                reading = await self.fetcher.async_fetch(station_id, api_key)
        except TankerkoenigApiClientError as error:
            self._log("warning", "Fetching price failed: %s", error)
            reading = self._handle_failure(error)
        except TimeoutError as error:
            self._log("warning", "Fetching price timed out after %s", self._fetch_timeout)
            reading = self._handle_failure(error)
        except Exception as error:  # noqa: BLE001
            self._log("exception", "Unexpected error while fetching price")
            reading = self._handle_failure(error)
        else:
            self.last_exception = None
            self._log("debug", "Fetched %s price %s for %s", reading.fuel_type, reading.price, reading.station_name)

        self.store.write(reading)
        self.state = CoordinatorState.IDLE
        return reading

    def _handle_failure(self, error: Exception) -> PriceReading:
        """Build the degraded reading after a failed fetch."""
        self.last_exception = error

        last_known = self.store.last_known_price()
        if last_known is not None:
            return last_known.as_unavailable()

        current = self.store.read()
        return PriceReading(
            station_name=current.station_name,
            price=None,
            observed_at=self.last_attempt,
            status=ReadingStatus.UNAVAILABLE,
            fuel_type=current.fuel_type,
        )

    async def async_shutdown(self) -> None:
        """Stop the background task. Safe to call more than once."""
        task, self._task = self._task, None
        if task is None:
            return

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        self.state = CoordinatorState.IDLE
        self._log("info", "Refresh loop stopped")
