"""Tests for the Tankerkönig API client and response parsing."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, Mock

import aiohttp
import pytest

from tankerkoenig_dashboard.api import (
    TankerkoenigApiClient,
    TankerkoenigApiClientCommunicationError,
    TankerkoenigApiClientError,
    TankerkoenigApiClientHttpError,
    TankerkoenigApiClientNoDataError,
    TankerkoenigApiClientParseError,
)
from tankerkoenig_dashboard.api.client import DETAIL_ENDPOINT
from tankerkoenig_dashboard.api.helpers import mask_params
from tankerkoenig_dashboard.coordinator.time_service import TankerkoenigTimeService
from tankerkoenig_dashboard.data import ReadingStatus

STATION_ID = "51d4b477-a095-1aa0-e100-80009459e03a"
API_KEY = "00000000-0000-0000-0000-000000000002"
NOW = datetime(2025, 11, 22, 14, 0, 0, tzinfo=UTC)


def _station_payload(**overrides: Any) -> dict[str, Any]:
    """Build a detail.php success body."""
    station = {
        "id": STATION_ID,
        "name": "Lenz Energie Weiterstadt",
        "brand": "Lenz Energie",
        "isOpen": True,
        "e5": 1.779,
        "e10": 1.899,
        "diesel": 1.679,
    }
    station.update(overrides)
    return {"ok": True, "license": "CC BY 4.0", "status": "ok", "station": station}


def _create_client(
    *,
    status: int = 200,
    payload: Any = None,
    json_error: Exception | None = None,
    request_error: Exception | None = None,
    fuel_type: str = "e10",
) -> tuple[TankerkoenigApiClient, Mock, Mock]:
    """Create a client with a mocked aiohttp session and response."""
    response = Mock()
    response.status = status
    response.release = Mock()
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)

    session = Mock()
    if request_error is not None:
        session.request = AsyncMock(side_effect=request_error)
    else:
        session.request = AsyncMock(return_value=response)

    client = TankerkoenigApiClient(session, fuel_type=fuel_type)
    client.time = TankerkoenigTimeService(NOW)
    return client, session, response


@pytest.mark.asyncio
async def test_fetch_success_returns_fresh_reading() -> None:
    """A valid body yields a FRESH reading for the configured grade."""
    client, _session, _response = _create_client(payload=_station_payload())

    reading = await client.async_fetch(STATION_ID, API_KEY)

    assert reading.status is ReadingStatus.FRESH
    assert reading.price == pytest.approx(1.899)
    assert reading.station_name == "Lenz Energie Weiterstadt"
    assert reading.observed_at == NOW
    assert reading.fuel_type == "e10"


@pytest.mark.asyncio
async def test_fetch_uses_detail_endpoint_with_query_parameters() -> None:
    """The station id and key are sent as query parameters of one GET."""
    client, session, response = _create_client(payload=_station_payload())

    await client.async_fetch(STATION_ID, API_KEY)

    session.request.assert_awaited_once()
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == DETAIL_ENDPOINT
    assert kwargs["params"] == {"id": STATION_ID, "apikey": API_KEY}
    assert isinstance(kwargs["timeout"], aiohttp.ClientTimeout)
    assert kwargs["timeout"].total == 10
    response.release.assert_called_once()


@pytest.mark.asyncio
async def test_fetch_other_fuel_grade() -> None:
    """The price is taken from the configured grade field."""
    client, _session, _response = _create_client(payload=_station_payload(), fuel_type="diesel")

    reading = await client.async_fetch(STATION_ID, API_KEY)

    assert reading.price == pytest.approx(1.679)
    assert reading.fuel_type == "diesel"


@pytest.mark.asyncio
async def test_fetch_combines_brand_and_name() -> None:
    """Brand is prefixed when the station name does not already contain it."""
    client, _session, _response = _create_client(payload=_station_payload(name="Weiterstadt", brand="ARAL"))

    reading = await client.async_fetch(STATION_ID, API_KEY)

    assert reading.station_name == "ARAL Weiterstadt"


@pytest.mark.asyncio
async def test_fetch_without_name_uses_placeholder() -> None:
    """Missing station metadata falls back to the placeholder name."""
    client, _session, _response = _create_client(payload=_station_payload(name=None, brand=""))

    reading = await client.async_fetch(STATION_ID, API_KEY)

    assert reading.station_name == "Meine Tankstelle"


@pytest.mark.asyncio
@pytest.mark.parametrize(("station_id", "api_key"), [("", API_KEY), (STATION_ID, "")])
async def test_fetch_rejects_empty_arguments(station_id: str, api_key: str) -> None:
    """Empty arguments fail before any request is made."""
    client, session, _response = _create_client(payload=_station_payload())

    with pytest.raises(TankerkoenigApiClientError):
        await client.async_fetch(station_id, api_key)

    session.request.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_http_error() -> None:
    """Non-2xx status maps to the HTTP error and keeps the status."""
    client, _session, response = _create_client(status=503, payload=None)

    with pytest.raises(TankerkoenigApiClientHttpError) as exc_info:
        await client.async_fetch(STATION_ID, API_KEY)

    assert exc_info.value.status == 503
    response.json.assert_not_awaited()
    response.release.assert_called_once()


@pytest.mark.asyncio
async def test_fetch_connection_error() -> None:
    """Transport failures map to the communication error."""
    client, _session, _response = _create_client(request_error=aiohttp.ClientConnectionError("connection reset"))

    with pytest.raises(TankerkoenigApiClientCommunicationError):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
async def test_fetch_timeout() -> None:
    """A timed out request maps to the communication error."""
    client, _session, _response = _create_client(request_error=TimeoutError())

    with pytest.raises(TankerkoenigApiClientCommunicationError, match="Timeout"):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
async def test_fetch_os_error() -> None:
    """Low-level socket errors map to the communication error."""
    client, _session, _response = _create_client(request_error=OSError(101, "Network is unreachable"))

    with pytest.raises(TankerkoenigApiClientCommunicationError):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
async def test_fetch_invalid_json() -> None:
    """An unparseable body maps to the parse error."""
    client, _session, _response = _create_client(json_error=json.JSONDecodeError("Expecting value", "<html>", 0))

    with pytest.raises(TankerkoenigApiClientParseError):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"ok": True},
        {"ok": True, "station": "Lenz"},
        _station_payload(e10="1,899"),
        _station_payload(e10=float("nan")),
        _station_payload(e10=float("inf")),
    ],
)
async def test_fetch_unexpected_structure(payload: Any) -> None:
    """Bodies with the wrong shape map to the parse error."""
    client, _session, _response = _create_client(payload=payload)

    with pytest.raises(TankerkoenigApiClientParseError):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
async def test_fetch_provider_error_message() -> None:
    """ok=false maps to the no-data error carrying the provider message."""
    client, _session, _response = _create_client(payload={"ok": False, "message": "apikey nicht gültig"})

    with pytest.raises(TankerkoenigApiClientNoDataError, match="apikey nicht gültig"):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
async def test_fetch_station_closed() -> None:
    """A closed station is reported as no data."""
    client, _session, _response = _create_client(payload=_station_payload(isOpen=False))

    with pytest.raises(TankerkoenigApiClientNoDataError, match="closed"):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [None, False, 0, -1.0])
async def test_fetch_missing_price(price: Any) -> None:
    """false, null and non-positive prices are reported as no data."""
    client, _session, _response = _create_client(payload=_station_payload(e10=price))

    with pytest.raises(TankerkoenigApiClientNoDataError):
        await client.async_fetch(STATION_ID, API_KEY)


@pytest.mark.asyncio
async def test_fetch_without_time_service_uses_real_clock() -> None:
    """Without a shared time service the reading is stamped with UTC now."""
    client, _session, _response = _create_client(payload=_station_payload())
    client.time = None

    before = datetime.now(UTC)
    reading = await client.async_fetch(STATION_ID, API_KEY)

    assert reading.observed_at is not None
    assert reading.observed_at >= before


@pytest.mark.unit
def test_mask_params_hides_api_key() -> None:
    """The API key never appears in logged parameters."""
    masked = mask_params({"id": STATION_ID, "apikey": API_KEY})

    assert masked == {"id": STATION_ID, "apikey": "***"}
