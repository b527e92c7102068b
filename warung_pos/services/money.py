"""
Money Utilities - integer arithmetic for whole-unit prices.

Prices are whole Rupiah; there are no fractional units, so every amount is a
plain ``int`` and nothing ever goes through float.
"""
from typing import Iterable, Protocol

from warung_pos.config import CURRENCY_PREFIX
from warung_pos.errors import InvalidAmount, InvalidQuantity


class Priced(Protocol):
    unit_price: int
    quantity: int


def _is_whole_number(value: object) -> bool:
    # bool is an int subclass; True must not pass as a price of 1
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_amount(value: object) -> int:
    """
    Validate a unit price.

    Raises:
        InvalidAmount: if value is not an int or is not positive
    """
    if not _is_whole_number(value) or value <= 0:
        raise InvalidAmount()
    return value


def ensure_quantity(value: object) -> int:
    """
    Validate an explicit quantity.

    Raises:
        InvalidQuantity: if value is not an int or is below 1
    """
    if not _is_whole_number(value) or value < 1:
        raise InvalidQuantity()
    return value


def subtotal(unit_price: int, quantity: int) -> int:
    """Price of one line: unit_price x quantity. Inputs are assumed validated."""
    return unit_price * quantity


def total(items: Iterable[Priced]) -> int:
    """Sum of line subtotals; 0 for no items."""
    return sum(subtotal(item.unit_price, item.quantity) for item in items)


def format_rupiah(amount: int, prefix: str = CURRENCY_PREFIX) -> str:
    """
    Format an amount for display with Indonesian thousands separators.

    Example:
        format_rupiah(25000) -> "Rp25.000"
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{prefix}{abs(amount):,}".replace(",", ".")
