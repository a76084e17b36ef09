"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.lookup import get_product_or_raise
from catalog.domain.exceptions import require
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")

    def handle(self, product_id: str) -> ProductDTO:
        return ProductDTO.from_domain(
            get_product_or_raise(self._product_repo, product_id)
        )
