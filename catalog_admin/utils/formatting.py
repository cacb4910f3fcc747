"""Display formatting helpers."""

from decimal import Decimal
from typing import Any, Optional

from catalog_admin.config import settings


def format_price(price: Any, symbol: Optional[str] = None) -> str:
    """
    Format a price with a currency symbol and two decimals.

    Anything that is not a number is shown as zero.

    Example:
        >>> format_price(1299.5, "₹")
        '₹1299.50'
    """
    symbol = settings.currency_symbol if symbol is None else symbol
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return f"{symbol}0.00"
    return f"{symbol}{price:.2f}"
