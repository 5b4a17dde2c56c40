"""Request handlers for the dashboard page and health checks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aiohttp import web

from tankerkoenig_dashboard.const import FUEL_TYPE_LABELS, PAGE_REFRESH_SECONDS
from tankerkoenig_dashboard.data import ReadingStatus
from tankerkoenig_dashboard.utils.price import format_price

from .keys import DATA_KEY, TEMPLATES_KEY

if TYPE_CHECKING:
    from tankerkoenig_dashboard.coordinator import TankerkoenigTimeService
    from tankerkoenig_dashboard.data import PriceReading

_LOGGER = logging.getLogger(__name__)

STATUS_NOTES = {
    ReadingStatus.FRESH: None,
    ReadingStatus.STALE: "Preis wird geladen …",
    ReadingStatus.UNCONFIGURED: "Keine Tankstelle konfiguriert",
    ReadingStatus.UNAVAILABLE: "Preis derzeit nicht abrufbar, letzter bekannter Stand",
}


def page_context(reading: PriceReading, time: TankerkoenigTimeService) -> dict[str, Any]:
    """Build the template variables for one reading."""
    return {
        "refresh_seconds": PAGE_REFRESH_SECONDS,
        "station_name": reading.station_name,
        "fuel_label": FUEL_TYPE_LABELS.get(reading.fuel_type, reading.fuel_type),
        "price": format_price(reading.price),
        "updated": time.format_local(reading.observed_at),
        "note": STATUS_NOTES.get(reading.status),
    }


async def dashboard(request: web.Request) -> web.Response:
    """Render the price page from the store's current reading."""
    data = request.app[DATA_KEY]
    reading = data.store.read()
    template = request.app[TEMPLATES_KEY].get_template("index.html")

    body = template.render(**page_context(reading, data.time))
    return web.Response(text=body, content_type="text/html", charset="utf-8")


async def health(_request: web.Request) -> web.Response:
    """Liveness probe for the hosting platform."""
    return web.Response(text="ok")
