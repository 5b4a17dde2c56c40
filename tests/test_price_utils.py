"""Tests for price display helpers."""

from __future__ import annotations

import pytest

from tankerkoenig_dashboard.utils.price import format_price, station_display_name


@pytest.mark.unit
def test_format_price_placeholder() -> None:
    """No price renders as the placeholder."""
    assert format_price(None) == "– €"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (1.899, "1.90 €"),
        (1.759, "1.76 €"),
        (1.7, "1.70 €"),
        (2, "2.00 €"),
    ],
)
def test_format_price_two_decimals(price: float, expected: str) -> None:
    """Prices render with fixed two-decimal precision."""
    assert format_price(price) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("brand", "name", "expected"),
    [
        ("Lenz Energie", "Lenz Energie Weiterstadt", "Lenz Energie Weiterstadt"),
        ("ARAL", "Weiterstadt", "ARAL Weiterstadt"),
        ("aral", "ARAL Tankstelle", "ARAL Tankstelle"),
        (None, "Freie Tankstelle", "Freie Tankstelle"),
        ("Shell", None, "Shell"),
        ("", "  ", "Meine Tankstelle"),
        (None, None, "Meine Tankstelle"),
    ],
)
def test_station_display_name(brand: str | None, name: str | None, expected: str) -> None:
    """Brand and name are combined without duplication."""
    assert station_display_name(brand, name) == expected
