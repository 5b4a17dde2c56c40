"""Constants for the Tankerkönig station dashboard."""

DOMAIN = "tankerkoenig_dashboard"

# Environment variables (read once at startup)
ENV_API_KEY = "TANKERKOENIG_API_KEY"
ENV_STATION_ID = "TANKERKOENIG_STATION_ID"
ENV_FUEL_TYPE = "TANKERKOENIG_FUEL_TYPE"
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_TIMEZONE = "TZ_DISPLAY"

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEZONE = "Europe/Berlin"

# Fuel grades as named by the Tankerkönig API
FUEL_TYPE_E5 = "e5"
FUEL_TYPE_E10 = "e10"
FUEL_TYPE_DIESEL = "diesel"
DEFAULT_FUEL_TYPE = FUEL_TYPE_E10

FUEL_TYPE_LABELS = {
    FUEL_TYPE_E5: "Super E5",
    FUEL_TYPE_E10: "Super E10",
    FUEL_TYPE_DIESEL: "Diesel",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Placeholder display values
DEFAULT_STATION_NAME = "Meine Tankstelle"
PRICE_PLACEHOLDER = "– €"
TIMESTAMP_PLACEHOLDER = "–"

# Page reload cadence, kept equal to the coordinator's UPDATE_INTERVAL
PAGE_REFRESH_SECONDS = 60
