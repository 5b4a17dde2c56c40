"""Environment configuration for the dashboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import voluptuous as vol

from .const import (
    DEFAULT_FUEL_TYPE,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TIMEZONE,
    ENV_API_KEY,
    ENV_FUEL_TYPE,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
    ENV_STATION_ID,
    ENV_TIMEZONE,
    FUEL_TYPE_LABELS,
    LOG_LEVELS,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER = logging.getLogger(__name__)


class TankerkoenigConfigError(Exception):
    """Exception to indicate an invalid configuration value."""

    INVALID_VALUE = "Invalid configuration: {error}"


class TankerkoenigConfigMissingError(Exception):
    """Exception to indicate that API key or station id is not configured."""

    MISSING_CREDENTIALS = "Missing configuration: {names}"


def _valid_timezone(value: str) -> str:
    """Reject timezone names zoneinfo does not know."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as error:
        msg = f"unknown timezone {value!r}"
        raise vol.Invalid(msg) from error
    return value


_OPTIONAL_TEXT = vol.Any(None, vol.All(str, vol.Strip))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(ENV_API_KEY, default=None): _OPTIONAL_TEXT,
        vol.Optional(ENV_STATION_ID, default=None): _OPTIONAL_TEXT,
        vol.Optional(ENV_FUEL_TYPE, default=DEFAULT_FUEL_TYPE): vol.All(
            str, vol.Strip, vol.Lower, vol.In(list(FUEL_TYPE_LABELS))
        ),
        vol.Optional(ENV_HOST, default=DEFAULT_HOST): vol.All(str, vol.Strip, vol.Length(min=1)),
        vol.Optional(ENV_PORT, default=DEFAULT_PORT): vol.All(vol.Coerce(int), vol.Range(min=1, max=65535)),
        vol.Optional(ENV_LOG_LEVEL, default=DEFAULT_LOG_LEVEL): vol.All(
            str, vol.Strip, vol.Upper, vol.In(LOG_LEVELS)
        ),
        vol.Optional(ENV_TIMEZONE, default=DEFAULT_TIMEZONE): vol.All(str, vol.Strip, _valid_timezone),
    },
    extra=vol.ALLOW_EXTRA,
)


@dataclass(frozen=True, slots=True)
class DashboardConfig:
    """Validated process configuration."""

    api_key: str | None = None
    station_id: str | None = None
    fuel_type: str = DEFAULT_FUEL_TYPE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    timezone: str = DEFAULT_TIMEZONE

    @property
    def is_configured(self) -> bool:
        """Return True if both API key and station id are present."""
        return bool(self.api_key) and bool(self.station_id)

    def require_credentials(self) -> tuple[str, str]:
        """
        Return (station_id, api_key) for fetching.

        Raises:
            TankerkoenigConfigMissingError: If either value is absent.

        """
        missing = [
            name
            for name, value in ((ENV_STATION_ID, self.station_id), (ENV_API_KEY, self.api_key))
            if not value
        ]
        if missing:
            raise TankerkoenigConfigMissingError(
                TankerkoenigConfigMissingError.MISSING_CREDENTIALS.format(names=", ".join(missing))
            )
        return self.station_id, self.api_key  # type: ignore[return-value]


def load_config(environ: Mapping[str, Any]) -> DashboardConfig:
    """
    Build the configuration from an environment mapping.

    Missing or empty API key and station id are valid and select the
    unconfigured mode. Other invalid values raise TankerkoenigConfigError.

    """
    try:
        validated = CONFIG_SCHEMA(dict(environ))
    except vol.Invalid as error:
        raise TankerkoenigConfigError(TankerkoenigConfigError.INVALID_VALUE.format(error=error)) from error

    config = DashboardConfig(
        api_key=validated[ENV_API_KEY] or None,
        station_id=validated[ENV_STATION_ID] or None,
        fuel_type=validated[ENV_FUEL_TYPE],
        host=validated[ENV_HOST],
        port=validated[ENV_PORT],
        log_level=validated[ENV_LOG_LEVEL],
        timezone=validated[ENV_TIMEZONE],
    )
    _LOGGER.debug(
        "Loaded configuration: station=%s, api_key=%s, fuel_type=%s, port=%d",
        config.station_id or "<unset>",
        "<set>" if config.api_key else "<unset>",
        config.fuel_type,
        config.port,
    )
    return config
