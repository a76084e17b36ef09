"""Domain service: catalog-wide product rules.

Rules that span more than one Product (name uniqueness, creation and
update checks, deletion policy, inventory statistics) live here.  The
service is stateless and performs no lookups of its own: the
application layer loads the products a rule needs and passes them in.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError, require
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId


@dataclass(frozen=True)
class InventoryStatistics:
    """Point-in-time counts over the catalog.  Never persisted."""

    total_products: int
    active_products: int
    inactive_products: int
    products_in_stock: int
    products_out_of_stock: int


class ProductDomainService:

    def is_name_unique(
        self,
        name: str | None,
        candidates: Iterable[Product],
        exclude_id: ProductId | None = None,
    ) -> bool:
        """True if no candidate other than *exclude_id* already uses *name*.

        Names are compared trimmed and case-insensitively.  A blank name
        is never unique.
        """
        if name is None or not name.strip():
            return False
        wanted = name.strip().lower()
        return not any(
            product.name.lower() == wanted
            for product in candidates
            if exclude_id is None or product.id != exclude_id
        )

    def validate_for_creation(
        self, product: Product, existing_products: Iterable[Product]
    ) -> None:
        require(product, "Product cannot be null")
        if not self.is_name_unique(product.name, existing_products):
            raise ValidationError(f"Product name '{product.name}' already exists")
        if not product.is_active():
            raise ValidationError("New products must be created as active")

    def validate_for_update(
        self,
        product: Product,
        existing_products: Iterable[Product],
        product_exists: bool,
    ) -> None:
        require(product, "Product cannot be null")
        if not product_exists:
            raise ValidationError(f"Product with ID {product.id} does not exist")
        if not self.is_name_unique(product.name, existing_products, product.id):
            raise ValidationError(f"Product name '{product.name}' already exists")

    def can_delete(self, product_id: ProductId, product_exists: bool) -> bool:
        """Deletion policy.

        Only existence is checked today; this is where references from
        other aggregates would veto a deletion.
        """
        require(product_id, "Product ID cannot be null")
        return product_exists

    def compute_statistics(
        self,
        all_products: Iterable[Product],
        active_products: Iterable[Product],
    ) -> InventoryStatistics:
        all_list = list(all_products)
        active_list = list(active_products)

        total = len(all_list)
        active = len(active_list)
        in_stock = sum(1 for product in active_list if product.is_in_stock())

        return InventoryStatistics(
            total_products=total,
            active_products=active,
            inactive_products=total - active,
            products_in_stock=in_stock,
            products_out_of_stock=active - in_stock,
        )
