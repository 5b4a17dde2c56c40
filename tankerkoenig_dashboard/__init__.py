"""
Self-refreshing fuel price page for a single Tankerkönig station.

The refresh coordinator polls the Tankerkönig API once a minute and keeps the
latest reading in a shared in-memory store; the aiohttp app renders that
reading without ever waiting on the network.
"""

from __future__ import annotations

import contextlib
import logging
from functools import partial
from typing import TYPE_CHECKING

import aiohttp
from aiohttp.web import Application

from .api import TankerkoenigApiClient
from .coordinator import PriceStore, TankerkoenigRefreshCoordinator, TankerkoenigTimeService
from .data import TankerkoenigDashboardData
from .web import DATA_KEY, setup_routes

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from .config import DashboardConfig
    from .coordinator import PriceFetcher

__version__ = "0.1.0"

_LOGGER = logging.getLogger(__name__)


def create_app(
    config: DashboardConfig,
    *,
    fetcher: PriceFetcher | None = None,
    time: TankerkoenigTimeService | None = None,
) -> Application:
    """
    Build the web application with its store and refresh coordinator.

    Args:
        config: Validated configuration.
        fetcher: Optional price fetcher replacing the Tankerkönig API client.
        time: Optional time service shared by coordinator and page.

    Returns:
        aiohttp application; the coordinator starts with the app and stops
        before the HTTP client session is closed.

    """
    data = TankerkoenigDashboardData(
        config=config,
        store=PriceStore.for_config(config),
        time=time or TankerkoenigTimeService(display_timezone=config.timezone),
    )

    app = Application()
    app[DATA_KEY] = data
    setup_routes(app)
    app.cleanup_ctx.append(partial(_refresh_context, fetcher=fetcher))
    return app


async def _refresh_context(app: Application, fetcher: PriceFetcher | None = None) -> AsyncIterator[None]:
    """Run the refresh coordinator for the lifetime of the app."""
    data = app[DATA_KEY]

    async with contextlib.AsyncExitStack() as stack:
        if fetcher is None and data.config.is_configured:
            session = await stack.enter_async_context(aiohttp.ClientSession())
            fetcher = TankerkoenigApiClient(session, fuel_type=data.config.fuel_type)

        coordinator = TankerkoenigRefreshCoordinator(data.store, data.config, fetcher, time=data.time)
        data.coordinator = coordinator
        coordinator.async_start()

        yield

        await coordinator.async_shutdown()
        _LOGGER.debug("Dashboard shut down")


__all__ = [
    "__version__",
    "create_app",
]
