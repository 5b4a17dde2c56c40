"""Custom exceptions for API client."""

from __future__ import annotations


class TankerkoenigApiClientError(Exception):
    """Exception to indicate a general API error."""

    MISSING_ARGUMENT = "{name} is required"


class TankerkoenigApiClientCommunicationError(TankerkoenigApiClientError):
    """Exception to indicate a communication error."""

    TIMEOUT_ERROR = "Timeout error fetching information - {exception}"
    CONNECTION_ERROR = "Error fetching information - {exception}"


class TankerkoenigApiClientHttpError(TankerkoenigApiClientError):
    """Exception to indicate a non-success HTTP status."""

    HTTP_STATUS_ERROR = "Tankerkönig API answered with HTTP {status}"

    def __init__(self, status: int) -> None:
        """Remember the HTTP status for callers."""
        super().__init__(self.HTTP_STATUS_ERROR.format(status=status))
        self.status = status


class TankerkoenigApiClientParseError(TankerkoenigApiClientError):
    """Exception to indicate an unreadable response body."""

    INVALID_JSON = "Response is not valid JSON - {exception}"
    UNEXPECTED_FORMAT = "Unexpected response format: {detail}"


class TankerkoenigApiClientNoDataError(TankerkoenigApiClientError):
    """Exception to indicate the provider has no usable price for the station."""

    NOT_OK = "Tankerkönig API reported an error: {message}"
    STATION_CLOSED = "Station {station_id} is currently closed"
    NO_PRICE = "No {fuel_type} price available for station {station_id}"
