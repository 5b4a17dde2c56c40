"""Shared in-memory cell holding the latest price reading."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from tankerkoenig_dashboard.data import PriceReading, ReadingStatus

if TYPE_CHECKING:
    from tankerkoenig_dashboard.config import DashboardConfig

_LOGGER = logging.getLogger(__name__)


class PriceStore:
    """
    Single-writer, multi-reader store for the current PriceReading.

    Readings are immutable, so write() only swaps one reference under a lock
    and read() never sees fields from two different refresh cycles.
    """

    def __init__(self, initial: PriceReading) -> None:
        """Initialize the store with its first reading."""
        self._lock = threading.Lock()
        self._reading = initial
        self._last_priced: PriceReading | None = initial if initial.has_price else None

    @classmethod
    def for_config(cls, config: DashboardConfig) -> PriceStore:
        """
        Create the store with the startup placeholder for this configuration.

        UNCONFIGURED when credentials are missing (stays so for the process
        lifetime), otherwise STALE until the first fetch completes.
        """
        status = ReadingStatus.STALE if config.is_configured else ReadingStatus.UNCONFIGURED
        return cls(PriceReading.placeholder(status, fuel_type=config.fuel_type))

    def read(self) -> PriceReading:
        """Return the latest committed reading."""
        with self._lock:
            return self._reading

    def write(self, reading: PriceReading) -> None:
        """Replace the current reading."""
        with self._lock:
            self._reading = reading
            if reading.has_price:
                self._last_priced = reading
        _LOGGER.debug("Stored %s reading (price=%s)", reading.status, reading.price)

    def last_known_price(self) -> PriceReading | None:
        """Return the most recent reading that carried a price, if any."""
        with self._lock:
            return self._last_priced
