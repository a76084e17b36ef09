"""Application service: Seed Catalog use case.

Loads a small development data set.  Products whose name is already
taken are skipped, so seeding twice is harmless.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from catalog.application.change_status import DeactivateProductHandler
from catalog.application.create_product import CreateProductHandler
from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import require
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_domain_service import ProductDomainService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleProduct:
    name: str
    description: str
    price: str
    stock_quantity: int
    active: bool = True


SAMPLE_PRODUCTS = (
    SampleProduct(
        'MacBook Pro 16"', "Apple MacBook Pro with M2 chip, 16-inch display", "2999.99", 50
    ),
    SampleProduct("iPhone 15 Pro", "Latest iPhone with advanced camera system", "1199.99", 100),
    SampleProduct("Samsung Galaxy S24", "Android flagship smartphone", "899.99", 75),
    SampleProduct("Dell XPS 13", "Ultrabook with Intel Core i7", "1299.99", 0, active=False),
    SampleProduct("AirPods Pro", "Wireless earbuds with noise cancellation", "249.99", 200),
)


class SeedCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        domain_service: ProductDomainService,
    ) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")
        self._domain_service = require(
            domain_service, "Product domain service cannot be null"
        )

    def handle(self, currency: str) -> list[ProductDTO]:
        """Create every sample product not yet in the catalog."""
        create = CreateProductHandler(self._product_repo, self._domain_service)
        deactivate = DeactivateProductHandler(self._product_repo)
        existing = self._product_repo.list_all()

        created: list[ProductDTO] = []
        for sample in SAMPLE_PRODUCTS:
            if not self._domain_service.is_name_unique(sample.name, existing):
                logger.info("Skipping sample product %r: already present", sample.name)
                continue
            dto = create.handle(
                name=sample.name,
                description=sample.description,
                price=sample.price,
                currency=currency,
                stock_quantity=sample.stock_quantity,
            )
            if not sample.active:
                dto = deactivate.handle(dto.id)
            created.append(dto)
        return created
