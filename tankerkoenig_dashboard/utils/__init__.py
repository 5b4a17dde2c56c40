"""Utility functions for tankerkoenig_dashboard."""

from .price import format_price, station_display_name

__all__ = [
    "format_price",
    "station_display_name",
]
