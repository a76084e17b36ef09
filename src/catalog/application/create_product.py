"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.application.pricing import parse_price
from catalog.domain.exceptions import DomainException, require
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_domain_service import ProductDomainService

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        domain_service: ProductDomainService,
    ) -> None:
        self._product_repo = require(product_repo, "Product repository cannot be null")
        self._domain_service = require(
            domain_service, "Product domain service cannot be null"
        )

    def handle(
        self,
        name: str,
        description: str | None,
        price: str,
        currency: str,
        stock_quantity: int,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        Steps:
        1. Let the Product aggregate validate its own fields.
        2. Fetch products with a similar name and let the domain
           service enforce catalog-wide uniqueness.
        3. Persist and return a DTO.
        """
        try:
            product = Product.create(
                name=name,
                description=description,
                price=parse_price(price, currency),
                stock_quantity=stock_quantity,
            )
            candidates = self._product_repo.list_by_name_containing(product.name)
            self._domain_service.validate_for_creation(product, candidates)
        except DomainException as exc:
            logger.warning("Rejected product creation for %r: %s", name, exc)
            raise

        self._product_repo.save(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return ProductDTO.from_domain(product)
