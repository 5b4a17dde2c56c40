"""Tankerkönig API Client."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import aiohttp

from tankerkoenig_dashboard.const import DEFAULT_FUEL_TYPE

from .exceptions import (
    TankerkoenigApiClientCommunicationError,
    TankerkoenigApiClientError,
    TankerkoenigApiClientParseError,
)
from .helpers import mask_params, parse_station_detail, verify_response_or_raise

if TYPE_CHECKING:
    from tankerkoenig_dashboard.coordinator.time_service import TankerkoenigTimeService
    from tankerkoenig_dashboard.data import PriceReading

_LOGGER = logging.getLogger(__name__)
_LOGGER_API_DETAILS = logging.getLogger(__name__ + ".details")

API_BASE_URL = "https://creativecommons.tankerkoenig.de/json"
DETAIL_ENDPOINT = f"{API_BASE_URL}/detail.php"


class TankerkoenigApiClient:
    """Tankerkönig API Client."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        fuel_type: str = DEFAULT_FUEL_TYPE,
    ) -> None:
        """Tankerkönig API Client."""
        self._session = session
        self._fuel_type = fuel_type
        self.time: TankerkoenigTimeService | None = None  # Set externally by coordinator

        # Bounded so a hung request cannot stall the refresh loop
        self._connect_timeout = 5
        self._request_timeout = 10

    @property
    def fuel_type(self) -> str:
        """Fuel grade whose price is extracted."""
        return self._fuel_type

    async def async_fetch(self, station_id: str, api_key: str) -> PriceReading:
        """
        Fetch the current price of one station.

        Args:
            station_id: Tankerkönig station UUID (opaque, not validated).
            api_key: Tankerkönig API key.

        Returns:
            PriceReading with status FRESH.

        Raises:
            TankerkoenigApiClientError: Missing arguments, or any subclass for
                transport, HTTP, parse and "no data" failures.

        """
        if not station_id:
            raise TankerkoenigApiClientError(TankerkoenigApiClientError.MISSING_ARGUMENT.format(name="Station ID"))
        if not api_key:
            raise TankerkoenigApiClientError(TankerkoenigApiClientError.MISSING_ARGUMENT.format(name="API key"))

        params = {"id": station_id, "apikey": api_key}
        payload = await self._make_request(params)

        return parse_station_detail(
            payload,
            station_id=station_id,
            fuel_type=self._fuel_type,
            observed_at=self._now(),
        )

    def _now(self) -> datetime:
        """Current time from the shared time service, or real UTC time."""
        if self.time:
            return self.time.now()
        return datetime.now(UTC)

    async def _make_request(self, params: dict[str, str]) -> Any:
        """Make an API request with comprehensive error handling for network issues."""
        _LOGGER_API_DETAILS.debug("Requesting %s with params %s", DETAIL_ENDPOINT, mask_params(params))

        timeout = aiohttp.ClientTimeout(
            total=self._request_timeout,
            connect=self._connect_timeout,
        )

        try:
            response = await self._session.request(
                method="GET",
                url=DETAIL_ENDPOINT,
                params=params,
                timeout=timeout,
            )

            try:
                verify_response_or_raise(response)
                payload = await response.json(content_type=None)
            finally:
                response.release()

        except TankerkoenigApiClientError:
            raise

        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            _LOGGER.warning("Tankerkönig API returned a body that is not JSON: %s", error)
            raise TankerkoenigApiClientParseError(
                TankerkoenigApiClientParseError.INVALID_JSON.format(exception=str(error))
            ) from error

        except TimeoutError as error:
            _LOGGER.warning(
                "Request timeout after %d seconds - slow network or server overload",
                self._request_timeout,
            )
            raise TankerkoenigApiClientCommunicationError(
                TankerkoenigApiClientCommunicationError.TIMEOUT_ERROR.format(exception=str(error))
            ) from error

        except aiohttp.ClientError as error:
            _LOGGER.warning("Connection error - server unreachable or network down: %s", error)
            raise TankerkoenigApiClientCommunicationError(
                TankerkoenigApiClientCommunicationError.CONNECTION_ERROR.format(exception=str(error))
            ) from error

        except OSError as error:
            _LOGGER.warning("Network error - internet may be down: %s", error)
            raise TankerkoenigApiClientCommunicationError(
                TankerkoenigApiClientCommunicationError.CONNECTION_ERROR.format(exception=str(error))
            ) from error

        _LOGGER_API_DETAILS.debug("Received API response: %s", payload)
        return payload
