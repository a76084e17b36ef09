"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the adapters (CLI) and application layers
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product
from catalog.domain.service.product_domain_service import InventoryStatistics


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    description: str | None
    price: str  # two decimals, e.g. "9.99"
    currency: str
    stock_quantity: int
    status: str
    available: bool
    created_at: str  # ISO-8601
    updated_at: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id.value,
            name=product.name,
            description=product.description,
            price=f"{product.price.amount:.2f}",
            currency=product.price.currency,
            stock_quantity=product.stock_quantity,
            status=product.status.value,
            available=product.is_available(),
            created_at=product.created_at.isoformat(),
            updated_at=product.updated_at.isoformat(),
        )


@dataclass(frozen=True)
class InventoryStatisticsDTO:
    total_products: int
    active_products: int
    inactive_products: int
    products_in_stock: int
    products_out_of_stock: int

    @staticmethod
    def from_domain(stats: InventoryStatistics) -> InventoryStatisticsDTO:
        return InventoryStatisticsDTO(
            total_products=stats.total_products,
            active_products=stats.active_products,
            inactive_products=stats.inactive_products,
            products_in_stock=stats.products_in_stock,
            products_out_of_stock=stats.products_out_of_stock,
        )
