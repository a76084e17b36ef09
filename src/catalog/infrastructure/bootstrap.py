"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Configuration is read
on every call so the data directory can be switched through the
environment.
"""

from __future__ import annotations

from catalog.domain.service.product_domain_service import ProductDomainService
from catalog.infrastructure.config import CatalogConfig
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def load_config() -> CatalogConfig:
    return CatalogConfig.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(load_config().products_file)


def domain_service() -> ProductDomainService:
    return ProductDomainService()
