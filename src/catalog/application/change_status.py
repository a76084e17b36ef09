"""Application service: Activate / Deactivate Product use cases."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.application.lookup import get_product_or_raise
from catalog.domain.exceptions import require
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ActivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")

    def handle(self, product_id: str) -> ProductDTO:
        product = get_product_or_raise(self._product_repo, product_id)
        product.activate()
        self._product_repo.save(product)
        logger.info("Activated product %s", product.id)
        return ProductDTO.from_domain(product)


class DeactivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")

    def handle(self, product_id: str) -> ProductDTO:
        product = get_product_or_raise(self._product_repo, product_id)
        product.deactivate()
        self._product_repo.save(product)
        logger.info("Deactivated product %s", product.id)
        return ProductDTO.from_domain(product)
