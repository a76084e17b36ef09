"""Application service: Update Product use case.

Changes are applied to a copy of the stored product and only saved
once the domain service has accepted the result, so a rejected update
leaves the stored product untouched.
"""

from __future__ import annotations

import copy
import logging

from catalog.application.dto import ProductDTO
from catalog.application.lookup import get_product_or_raise
from catalog.application.pricing import parse_price
from catalog.domain.exceptions import DomainException, require
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_domain_service import ProductDomainService

logger = logging.getLogger(__name__)


class UpdateProductHandler:

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
        product_id: str,
        name: str,
        description: str | None,
        price: str,
        currency: str | None = None,
    ) -> ProductDTO:
        """Replace name, description and price.

        Without a *currency* the product keeps the one it is priced in.
        """
        try:
            stored = get_product_or_raise(self._product_repo, product_id)
            new_price = parse_price(price, currency or stored.price.currency)

            product = copy.copy(stored)
            product.update_name(name)
            product.update_description(description)
            product.update_price(new_price)

            candidates = self._product_repo.list_by_name_containing(product.name)
            self._domain_service.validate_for_update(
                product, candidates, self._product_repo.exists(product.id)
            )
        except DomainException as exc:
            logger.warning("Rejected update of product %s: %s", product_id, exc)
            raise

        self._product_repo.save(product)
        logger.info("Updated product %s (%s)", product.id, product.name)
        return ProductDTO.from_domain(product)
