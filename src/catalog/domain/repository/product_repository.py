"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

The domain service never calls a repository; application handlers
load whatever data a rule needs and pass it in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product and return it."""

    @abstractmethod
    def get_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_name_containing(self, text: str) -> list[Product]:
        """Return products whose name contains *text* (case-insensitive)."""

    @abstractmethod
    def list_active(self) -> list[Product]:
        """Return every product whose status is ACTIVE."""

    @abstractmethod
    def exists(self, product_id: ProductId) -> bool:
        """Return True if a product with this ID is stored."""

    @abstractmethod
    def delete(self, product_id: ProductId) -> None:
        """Remove a product; a missing ID is a no-op."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""
