"""Application service: Inventory Statistics use case (query)."""

from __future__ import annotations

from catalog.application.dto import InventoryStatisticsDTO
from catalog.domain.exceptions import require
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_domain_service import ProductDomainService


class InventoryStatisticsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        domain_service: ProductDomainService,
    ) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")
        self._domain_service = require(
            domain_service, "Product domain service cannot be null"
        )

    def handle(self) -> InventoryStatisticsDTO:
        stats = self._domain_service.compute_statistics(
            self._product_repo.list_all(),
            self._product_repo.list_active(),
        )
        return InventoryStatisticsDTO.from_domain(stats)
