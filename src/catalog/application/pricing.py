"""Price parsing shared by the create and update use cases."""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money

MIN_PRICE = Decimal("0.01")


def parse_price(price: str, currency: str) -> Money:
    """Build a catalog price; it must still be at least 0.01 after rounding."""
    money = Money.of(price, currency)
    if money.amount < MIN_PRICE:
        raise ValidationError(f"Price must be at least {MIN_PRICE}, got {price!r}")
    return money
