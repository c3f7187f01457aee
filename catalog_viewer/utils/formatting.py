"""Display formatting helpers shared by the UI and CLI."""

from decimal import Decimal
from typing import Optional, Union


def format_price(price: Optional[Union[Decimal, float, int]]) -> str:
    """Format a price as US dollars, e.g. ``$1,299.00``."""
    if price is None:
        return "Price not available"
    return f"${Decimal(str(price)):,.2f}"


def display_value(value: Optional[str], placeholder: str = "N/A") -> str:
    """Return value, or the placeholder when it is missing or blank."""
    if value is None or not str(value).strip():
        return placeholder
    return str(value)
