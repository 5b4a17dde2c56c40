"""
Data update coordination package.

This package keeps the displayed price current:
- Station polling every 60 seconds
- Shared in-memory store read by the web handlers
- Fallback to the last known price when a fetch fails
- Injectable clock for simulated refresh cycles

Main components:
- core.py: TankerkoenigRefreshCoordinator (refresh loop and state machine)
- store.py: PriceStore (atomic single-reading cell)
- time_service.py: TankerkoenigTimeService (clock)
"""

from .constants import FETCH_TIMEOUT, UPDATE_INTERVAL
from .core import CoordinatorState, PriceFetcher, TankerkoenigRefreshCoordinator
from .store import PriceStore
from .time_service import TankerkoenigTimeService

__all__ = [
    "FETCH_TIMEOUT",
    "UPDATE_INTERVAL",
    "CoordinatorState",
    "PriceFetcher",
    "PriceStore",
    "TankerkoenigRefreshCoordinator",
    "TankerkoenigTimeService",
]
