"""Utility functions for price display."""

from __future__ import annotations

from tankerkoenig_dashboard.const import DEFAULT_STATION_NAME, PRICE_PLACEHOLDER

PRICE_DECIMALS = 2
CURRENCY_SYMBOL = "€"


def format_price(price: float | None) -> str:
    """
    Render a price per litre for display.

    Examples:
        None  → "– €"
        1.899 → "1.90 €"

    """
    if price is None:
        return PRICE_PLACEHOLDER
    return f"{price:.{PRICE_DECIMALS}f} {CURRENCY_SYMBOL}"


def station_display_name(brand: str | None, name: str | None) -> str:
    """
    Combine brand and station name the way the station list shows them.

    Falls back to the placeholder name when the API sends no name.
    """
    name = (name or "").strip()
    brand = (brand or "").strip()

    if not name:
        return brand or DEFAULT_STATION_NAME
    if not brand or name.lower().startswith(brand.lower()):
        return name
    return f"{brand} {name}"
