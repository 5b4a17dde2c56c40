"""Custom types for tankerkoenig_dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TYPE_CHECKING

from .const import DEFAULT_FUEL_TYPE, DEFAULT_STATION_NAME

if TYPE_CHECKING:
    from datetime import datetime

    from .config import DashboardConfig
    from .coordinator import PriceStore, TankerkoenigRefreshCoordinator, TankerkoenigTimeService


class ReadingStatus(StrEnum):
    """How current the displayed reading is."""

    FRESH = "fresh"
    STALE = "stale"
    UNCONFIGURED = "unconfigured"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class PriceReading:
    """
    One snapshot of the station's price.

    Readings are immutable. A refresh produces a new reading that replaces the
    previous one in the store as a whole.
    """

    station_name: str
    price: float | None
    observed_at: datetime | None
    status: ReadingStatus
    fuel_type: str = DEFAULT_FUEL_TYPE

    @classmethod
    def placeholder(cls, status: ReadingStatus, fuel_type: str = DEFAULT_FUEL_TYPE) -> PriceReading:
        """Build the "Meine Tankstelle / – €" reading used before any data is known."""
        return cls(
            station_name=DEFAULT_STATION_NAME,
            price=None,
            observed_at=None,
            status=status,
            fuel_type=fuel_type,
        )

    @property
    def has_price(self) -> bool:
        """Return True if this reading carries a price."""
        return self.price is not None

    def as_unavailable(self) -> PriceReading:
        """Return a copy marked unavailable, keeping price, name and timestamp."""
        return replace(self, status=ReadingStatus.UNAVAILABLE)


@dataclass
class TankerkoenigDashboardData:
    """Runtime data shared between the refresh coordinator and the web app."""

    config: DashboardConfig
    store: PriceStore
    time: TankerkoenigTimeService
    coordinator: TankerkoenigRefreshCoordinator | None = field(default=None)
