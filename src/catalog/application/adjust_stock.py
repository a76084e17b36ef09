"""Application service: Add Stock / Remove Stock use cases."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.application.lookup import get_product_or_raise
from catalog.domain.exceptions import DomainException, require
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")

    def handle(self, product_id: str, quantity: int) -> ProductDTO:
        product = get_product_or_raise(self._product_repo, product_id)
        try:
            product.add_stock(quantity)
        except DomainException as exc:
            logger.warning("Rejected stock receipt for %s: %s", product_id, exc)
            raise

        self._product_repo.save(product)
        logger.info(
            "Added %d units to %s (now %d)", quantity, product.id, product.stock_quantity
        )
        return ProductDTO.from_domain(product)


class RemoveStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")

    def handle(self, product_id: str, quantity: int) -> ProductDTO:
        """Take stock out; fails without changes if not enough is on hand."""
        product = get_product_or_raise(self._product_repo, product_id)
        try:
            product.remove_stock(quantity)
        except DomainException as exc:
            logger.warning("Rejected stock removal for %s: %s", product_id, exc)
            raise

        self._product_repo.save(product)
        logger.info(
            "Removed %d units from %s (now %d)",
            quantity,
            product.id,
            product.stock_quantity,
        )
        return ProductDTO.from_domain(product)
