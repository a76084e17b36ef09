"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class ProductId:
    """Opaque identity of a Product.

    New products get a random UUID; persisted products are reloaded
    from their stored string with ``ProductId.of``.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Product ID cannot be null or empty")
        object.__setattr__(self, "value", self.value.strip())

    @staticmethod
    def generate() -> ProductId:
        return ProductId(str(uuid.uuid4()))

    @staticmethod
    def of(raw: str | None) -> ProductId:
        """Parse a stored or user-supplied identifier."""
        if raw is None or not str(raw).strip():
            raise ValidationError("Product ID cannot be null or empty")
        return ProductId(str(raw))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    The amount is always held at two decimal places (rounded half-up)
    and the currency code is upper-case.  Use ``Money.of`` for values
    coming from the outside world: it rejects zero and negative amounts.
    Arithmetic may legitimately reach zero (e.g. ``a - a``) but never
    goes below it.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise ValidationError(
                f"Money amount must be a finite Decimal, got {self.amount!r}"
            )
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("Currency cannot be null or empty")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        object.__setattr__(
            self, "amount", self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        )
        object.__setattr__(self, "currency", self.currency.strip().upper())

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal | None, currency: str | None) -> Money:
        """Validating factory: amount must be strictly positive."""
        if amount is None:
            raise ValidationError("Amount must be positive")
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite() or value <= 0:
            raise ValidationError("Amount must be positive")
        if currency is None or not currency.strip():
            raise ValidationError("Currency cannot be null or empty")
        return Money(value, currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def multiply(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        if factor <= 0:
            raise ValidationError("Multiplier must be positive")
        return Money(self.amount * factor, self.currency)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
