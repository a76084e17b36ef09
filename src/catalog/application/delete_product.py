"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError, require
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_domain_service import ProductDomainService

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        domain_service: ProductDomainService,
    ) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")
        self._domain_service = require(
            domain_service, "Product domain service cannot be null"
        )

    def handle(self, product_id: str) -> None:
        pid = ProductId.of(product_id)
        exists = self._product_repo.exists(pid)
        if not self._domain_service.can_delete(pid, exists):
            logger.warning("Refused to delete product %s", pid)
            raise EntityNotFoundError(f"Product with ID '{pid}' not found")

        self._product_repo.delete(pid)
        logger.info("Deleted product %s", pid)
