"""Application service: List / Search Products use cases (queries)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import ValidationError, require
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")

    def all(self) -> list[ProductDTO]:
        return self._to_dtos(self._product_repo.list_all())

    def active(self) -> list[ProductDTO]:
        return self._to_dtos(self._product_repo.list_active())

    def search(self, text: str) -> list[ProductDTO]:
        """Products whose name contains *text*, ignoring case."""
        if text is None or not text.strip():
            raise ValidationError("Search text is required")
        return self._to_dtos(self._product_repo.list_by_name_containing(text.strip()))

    @staticmethod
    def _to_dtos(products: list[Product]) -> list[ProductDTO]:
        return [
            ProductDTO.from_domain(p)
            for p in sorted(products, key=lambda p: p.name.lower())
        ]
