"""Helper functions for API response processing."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from tankerkoenig_dashboard.data import PriceReading, ReadingStatus
from tankerkoenig_dashboard.utils.price import station_display_name

from .exceptions import (
    TankerkoenigApiClientHttpError,
    TankerkoenigApiClientNoDataError,
    TankerkoenigApiClientParseError,
)

if TYPE_CHECKING:
    from datetime import datetime

    import aiohttp

_LOGGER = logging.getLogger(__name__)

HTTP_OK_MIN = 200
HTTP_OK_MAX = 299

MASKED_VALUE = "***"


def verify_response_or_raise(response: aiohttp.ClientResponse) -> None:
    """
    Verify HTTP response status.

    Any status outside 2xx maps to TankerkoenigApiClientHttpError. The
    provider reports most problems (bad key, unknown station) with HTTP 200
    and "ok": false, which is handled in parse_station_detail().
    """
    if HTTP_OK_MIN <= response.status <= HTTP_OK_MAX:
        return

    _LOGGER.warning("Tankerkönig API answered with HTTP %d", response.status)
    raise TankerkoenigApiClientHttpError(response.status)


def mask_params(params: dict[str, str]) -> dict[str, str]:
    """Return query parameters safe for logging (API key hidden)."""
    return {key: (MASKED_VALUE if key == "apikey" else value) for key, value in params.items()}


def _extract_price(station: dict[str, Any], fuel_type: str, station_id: str) -> float:
    """
    Read the price of one fuel grade from the station payload.

    The API sends false or null when a grade is not sold or not reported.
    """
    raw = station.get(fuel_type)

    # bool is a subclass of int, so check it first
    if raw is None or isinstance(raw, bool):
        raise TankerkoenigApiClientNoDataError(
            TankerkoenigApiClientNoDataError.NO_PRICE.format(fuel_type=fuel_type, station_id=station_id)
        )
    if not isinstance(raw, (int, float)) or not math.isfinite(raw):
        raise TankerkoenigApiClientParseError(
            TankerkoenigApiClientParseError.UNEXPECTED_FORMAT.format(detail=f"{fuel_type}={raw!r}")
        )
    if raw <= 0:
        raise TankerkoenigApiClientNoDataError(
            TankerkoenigApiClientNoDataError.NO_PRICE.format(fuel_type=fuel_type, station_id=station_id)
        )
    return float(raw)


def parse_station_detail(
    payload: Any,
    *,
    station_id: str,
    fuel_type: str,
    observed_at: datetime,
) -> PriceReading:
    """
    Turn a detail.php response body into a fresh PriceReading.

    Expected format:
        {"ok": true, "station": {"name": "...", "brand": "...", "isOpen": true,
                                 "e5": 1.779, "e10": 1.719, "diesel": 1.679, ...}}

    Raises:
        TankerkoenigApiClientParseError: Body is not the expected structure.
        TankerkoenigApiClientNoDataError: Provider reports an error, the
            station is closed, or the fuel grade has no price.

    """
    if not isinstance(payload, dict):
        raise TankerkoenigApiClientParseError(
            TankerkoenigApiClientParseError.UNEXPECTED_FORMAT.format(detail=f"top level is {type(payload).__name__}")
        )

    if payload.get("ok") is not True:
        message = payload.get("message") or "unknown error"
        raise TankerkoenigApiClientNoDataError(TankerkoenigApiClientNoDataError.NOT_OK.format(message=message))

    station = payload.get("station")
    if not isinstance(station, dict):
        raise TankerkoenigApiClientParseError(
            TankerkoenigApiClientParseError.UNEXPECTED_FORMAT.format(detail="missing station object")
        )

    if station.get("isOpen") is False:
        raise TankerkoenigApiClientNoDataError(
            TankerkoenigApiClientNoDataError.STATION_CLOSED.format(station_id=station_id)
        )

    price = _extract_price(station, fuel_type, station_id)

    name = station.get("name") if isinstance(station.get("name"), str) else None
    brand = station.get("brand") if isinstance(station.get("brand"), str) else None

    return PriceReading(
        station_name=station_display_name(brand, name),
        price=price,
        observed_at=observed_at,
        status=ReadingStatus.FRESH,
        fuel_type=fuel_type,
    )
