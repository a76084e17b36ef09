"""Integration tests for the stock adjustment and status use cases."""

import pytest

from catalog.application.adjust_stock import AddStockHandler, RemoveStockHandler
from catalog.application.change_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
)
from catalog.domain.exceptions import EntityNotFoundError, InvalidStateError, ValidationError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup(stock: int = 10) -> tuple[FakeProductRepository, Product]:
    product = Product.create("Widget", None, Money.of("5", "USD"), stock)
    return FakeProductRepository([product]), product


class TestAddStock:

    def test_adds_and_saves(self):
        repo, product = _setup(stock=10)
        dto = AddStockHandler(repo).handle(product.id.value, 5)
        assert dto.stock_quantity == 15
        assert repo.saved == [product]

    def test_zero_rejected_without_saving(self):
        repo, product = _setup()
        with pytest.raises(ValidationError):
            AddStockHandler(repo).handle(product.id.value, 0)
        assert repo.saved == []

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            AddStockHandler(repo).handle("nope", 1)


class TestRemoveStock:

    def test_removes(self):
        repo, product = _setup(stock=10)
        dto = RemoveStockHandler(repo).handle(product.id.value, 10)
        assert dto.stock_quantity == 0
        assert dto.available is False

    def test_insufficient_stock(self):
        repo, product = _setup(stock=2)
        with pytest.raises(InvalidStateError, match="Insufficient stock"):
            RemoveStockHandler(repo).handle(product.id.value, 3)
        assert repo.get_by_id(product.id).stock_quantity == 2
        assert repo.saved == []


class TestStatusChanges:

    def test_deactivate_then_activate(self):
        repo, product = _setup()
        dto = DeactivateProductHandler(repo).handle(product.id.value)
        assert dto.status == "INACTIVE"
        assert dto.available is False
        assert repo.get_by_id(product.id).status == ProductStatus.INACTIVE

        dto = ActivateProductHandler(repo).handle(product.id.value)
        assert dto.status == "ACTIVE"
        assert dto.available is True

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ActivateProductHandler(repo).handle("nope")
