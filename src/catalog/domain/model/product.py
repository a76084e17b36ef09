"""Product aggregate.

The Product is the unit of consistency of the catalog: its identity,
price, stock level and lifecycle status only ever change through the
methods below, and every successful change advances ``updated_at``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from catalog.domain.exceptions import InvalidStateError, ValidationError, require
from catalog.domain.model.value_objects import Money, ProductId

MAX_NAME_LENGTH = 100


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class ProductStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DISCONTINUED = "DISCONTINUED"  # only reachable by reloading a stored product

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Product:
    """Aggregate root for catalog products.

    Use ``Product.create()`` for brand-new products: it generates the id,
    starts the product ACTIVE and stamps both timestamps.  The constructor
    is for reconstituting persisted products and applies the same field
    validation to the supplied state.

    Invariants:
    - ``name`` is trimmed, non-blank and at most 100 characters
    - ``stock_quantity`` is never negative
    - ``price`` is never None

    Two products are equal when their ids are equal.
    """

    def __init__(
        self,
        id: ProductId,
        name: str,
        description: str | None,
        price: Money,
        stock_quantity: int,
        status: ProductStatus,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> None:
        self._id = require(id, "Product ID cannot be null")
        self._name = _validate_name(name)
        self._description = description
        self._price = require(price, "Price cannot be null")
        self._stock_quantity = _validate_stock_quantity(stock_quantity)
        self._status = require(status, "Status cannot be null")
        self._created_at = _as_utc(require(created_at, "Created at cannot be null"))
        self._updated_at = (
            _as_utc(updated_at) if updated_at is not None else self._created_at
        )

    # --- Factory (used for NEW products only) ---------------------------------

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None,
        price: Money,
        stock_quantity: int,
    ) -> Product:
        now = _now()
        return cls(
            id=ProductId.generate(),
            name=name,
            description=description,
            price=price,
            stock_quantity=stock_quantity,
            status=ProductStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    # --- Read-only state ------------------------------------------------------

    @property
    def id(self) -> ProductId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def price(self) -> Money:
        return self._price

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    @property
    def status(self) -> ProductStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # --- Attribute updates ----------------------------------------------------

    def update_name(self, new_name: str) -> None:
        self._name = _validate_name(new_name)
        self._touch()

    def update_description(self, new_description: str | None) -> None:
        self._description = new_description
        self._touch()

    def update_price(self, new_price: Money) -> None:
        self._price = require(new_price, "Price cannot be null")
        self._touch()

    # --- Inventory ------------------------------------------------------------

    def add_stock(self, quantity: int) -> None:
        _validate_adjustment(quantity, "add")
        self._stock_quantity += quantity
        self._touch()

    def remove_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        All-or-nothing: raises InvalidStateError when fewer than
        *quantity* units are on hand.
        """
        _validate_adjustment(quantity, "remove")
        if quantity > self._stock_quantity:
            raise InvalidStateError(
                f"Insufficient stock for {self._name} "
                f"(need {quantity}, have {self._stock_quantity})"
            )
        self._stock_quantity -= quantity
        self._touch()

    # --- State transitions ----------------------------------------------------

    def activate(self) -> None:
        self._status = ProductStatus.ACTIVE
        self._touch()

    def deactivate(self) -> None:
        self._status = ProductStatus.INACTIVE
        self._touch()

    # --- Computed predicates --------------------------------------------------

    def is_active(self) -> bool:
        return self._status == ProductStatus.ACTIVE

    def is_in_stock(self) -> bool:
        return self._stock_quantity > 0

    def is_available(self) -> bool:
        return self.is_active() and self.is_in_stock()

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id.value!r}, name={self._name!r}, "
            f"price={self._price}, stock_quantity={self._stock_quantity}, "
            f"status={self._status.value})"
        )

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        # never move backwards, even if the wall clock does
        self._updated_at = max(_now(), self._updated_at)


def _validate_name(name: str | None) -> str:
    if name is not None and not isinstance(name, str):
        raise ValidationError(
            f"Product name must be a string, got {type(name).__name__}"
        )
    if name is None or not name.strip():
        raise ValidationError("Product name cannot be null or empty")
    trimmed = name.strip()
    if len(trimmed) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
        )
    return trimmed


def _validate_stock_quantity(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
    return quantity


def _validate_adjustment(quantity: int, verb: str) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity to {verb} must be an integer, got {type(quantity).__name__}"
        )
    if quantity <= 0:
        raise ValidationError(f"Stock quantity to {verb} must be positive")
