"""
Tankerkönig API client package.

This package handles all communication with the Tankerkönig station API:
- Station detail request with bounded timeouts
- Response verification and parsing into a PriceReading
- Mapping of transport, HTTP, format and "no data" failures to typed errors

Main components:
- client.py: TankerkoenigApiClient (aiohttp-based client)
- exceptions.py: API-specific error classes
- helpers.py: Response parsing utilities
"""

from .client import TankerkoenigApiClient
from .exceptions import (
    TankerkoenigApiClientCommunicationError,
    TankerkoenigApiClientError,
    TankerkoenigApiClientHttpError,
    TankerkoenigApiClientNoDataError,
    TankerkoenigApiClientParseError,
)

__all__ = [
    "TankerkoenigApiClient",
    "TankerkoenigApiClientCommunicationError",
    "TankerkoenigApiClientError",
    "TankerkoenigApiClientHttpError",
    "TankerkoenigApiClientNoDataError",
    "TankerkoenigApiClientParseError",
]
