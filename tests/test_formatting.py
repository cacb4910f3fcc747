"""Tests for display formatting."""

from decimal import Decimal

import pytest

from catalog_admin.utils.formatting import format_price


@pytest.mark.parametrize(
    "price, expected",
    [
        (1299.5, "₹1299.50"),
        (0, "₹0.00"),
        (Decimal("10999"), "₹10999.00"),
        (None, "₹0.00"),
        ("12.5", "₹0.00"),
        (True, "₹0.00"),
    ],
)
def test_format_price(price, expected):
    assert format_price(price) == expected


def test_custom_symbol():
    assert format_price(5, "$") == "$5.00"
