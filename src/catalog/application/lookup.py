"""Shared lookup used by every handler that acts on one existing product."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


def get_product_or_raise(product_repo: ProductRepository, raw_id: str) -> Product:
    product_id = ProductId.of(raw_id)
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product
