"""Unit tests for the Product aggregate."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain.exceptions import InvalidStateError, PreconditionError, ValidationError
from catalog.domain.model import product as product_module
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money, ProductId


def _widget(stock: int = 5) -> Product:
    return Product.create("Widget", "d", Money.of(9.99, "USD"), stock)


def _reload(**overrides) -> Product:
    fields = dict(
        id=ProductId.of("p-1"),
        name="Widget",
        description=None,
        price=Money.of("9.99", "USD"),
        stock_quantity=3,
        status=ProductStatus.INACTIVE,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return Product(**fields)


class TestCreate:

    @pytest.mark.parametrize("qty", [0, 1, 42])
    def test_new_product_defaults(self, qty):
        p = Product.create("Widget", None, Money.of("1", "USD"), qty)
        assert p.status == ProductStatus.ACTIVE
        assert p.created_at == p.updated_at
        assert p.is_available() == (qty > 0)

    def test_generates_id(self):
        assert _widget().id != _widget().id

    def test_name_is_trimmed(self):
        assert Product.create("  Widget  ", None, Money.of("1", "USD"), 0).name == "Widget"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name cannot be null or empty"):
            Product.create(name, None, Money.of("1", "USD"), 0)

    def test_non_string_name_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            Product.create(42, None, Money.of("1", "USD"), 0)

    def test_name_of_exactly_100_chars_accepted(self):
        assert len(Product.create("x" * 100, None, Money.of("1", "USD"), 0).name) == 100

    def test_long_name_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed 100"):
            Product.create("x" * 101, None, Money.of("1", "USD"), 0)

    def test_missing_price_rejected(self):
        with pytest.raises(PreconditionError, match="Price cannot be null"):
            Product.create("Widget", None, None, 0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("Widget", None, Money.of("1", "USD"), -1)


class TestReconstruct:

    def test_keeps_supplied_state(self):
        p = _reload()
        assert p.id == ProductId.of("p-1")
        assert p.status == ProductStatus.INACTIVE
        assert p.updated_at == datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_updated_at_defaults_to_created_at(self):
        p = _reload(updated_at=None)
        assert p.updated_at == p.created_at

    def test_discontinued_only_reachable_by_reload(self):
        p = _reload(status=ProductStatus.DISCONTINUED)
        assert not p.is_active()
        assert p.status.label == "Discontinued"

    @pytest.mark.parametrize("field", ["id", "price", "status", "created_at"])
    def test_required_fields(self, field):
        with pytest.raises(PreconditionError):
            _reload(**{field: None})

    def test_corrupted_name_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            _reload(name=123)

    def test_field_validation_applies(self):
        with pytest.raises(ValidationError):
            _reload(name=" ")
        with pytest.raises(ValidationError):
            _reload(stock_quantity=-4)


class TestUpdates:

    def test_update_name(self):
        p = _reload()
        p.update_name(" Gizmo ")
        assert p.name == "Gizmo"
        assert p.updated_at > datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_invalid_name_leaves_product_unchanged(self):
        p = _reload()
        before = p.updated_at
        with pytest.raises(ValidationError):
            p.update_name("")
        assert p.name == "Widget"
        assert p.updated_at == before

    def test_update_description_allows_none(self):
        p = _reload(description="old")
        p.update_description(None)
        assert p.description is None

    def test_update_price(self):
        p = _reload()
        p.update_price(Money.of("12.00", "EUR"))
        assert p.price == Money.of("12", "EUR")

    def test_update_price_none_rejected(self):
        p = _reload()
        with pytest.raises(PreconditionError):
            p.update_price(None)
        assert p.price == Money.of("9.99", "USD")

    def test_updated_at_never_moves_backwards(self):
        future = datetime.now(timezone.utc) + timedelta(days=365)
        p = _reload(updated_at=future)
        p.activate()
        assert p.updated_at == future

    def test_touch_uses_current_time(self, monkeypatch):
        stamp = datetime(2030, 5, 5, tzinfo=timezone.utc)
        monkeypatch.setattr(product_module, "_now", lambda: stamp)
        p = _reload()
        p.add_stock(1)
        assert p.updated_at == stamp


class TestStock:

    def test_add_then_remove(self):
        p = _widget(stock=5)
        p.add_stock(3)
        p.remove_stock(6)
        assert p.stock_quantity == 2

    def test_remove_everything(self):
        p = _widget(stock=5)
        p.remove_stock(5)
        assert p.stock_quantity == 0
        assert not p.is_in_stock()
        assert not p.is_available()

    @pytest.mark.parametrize("qty", [0, -1])
    def test_add_non_positive_rejected(self, qty):
        p = _widget(stock=5)
        with pytest.raises(ValidationError, match="to add must be positive"):
            p.add_stock(qty)
        assert p.stock_quantity == 5

    @pytest.mark.parametrize("qty", [0, -1])
    def test_remove_non_positive_rejected(self, qty):
        p = _widget(stock=5)
        with pytest.raises(ValidationError, match="to remove must be positive"):
            p.remove_stock(qty)

    def test_remove_more_than_on_hand_fails_without_change(self):
        p = _widget(stock=5)
        before = p.updated_at
        for _ in range(2):
            with pytest.raises(InvalidStateError, match="Insufficient stock"):
                p.remove_stock(6)
        assert p.stock_quantity == 5
        assert p.updated_at == before

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            _widget().add_stock(1.5)


class TestStatus:

    def test_activate_deactivate_cycle(self):
        p = _widget(stock=5)
        stamps = [p.updated_at]
        for transition in (p.activate, p.deactivate, p.activate):
            transition()
            stamps.append(p.updated_at)
        assert p.status == ProductStatus.ACTIVE
        assert p.stock_quantity == 5
        assert stamps == sorted(stamps)

    def test_deactivated_product_is_not_available(self):
        p = _widget(stock=5)
        p.deactivate()
        assert p.status == ProductStatus.INACTIVE
        assert p.is_in_stock()
        assert not p.is_available()

    def test_activate_from_discontinued(self):
        p = _reload(status=ProductStatus.DISCONTINUED)
        p.activate()
        assert p.is_active()

    def test_labels(self):
        assert [s.label for s in ProductStatus] == ["Active", "Inactive", "Discontinued"]


class TestIdentity:

    def test_equal_when_ids_match(self):
        a = _reload(name="A", stock_quantity=1)
        b = _reload(name="B", stock_quantity=99)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_ids_not_equal(self):
        assert _reload() != _reload(id=ProductId.of("p-2"))

    def test_same_fields_different_ids_not_equal(self):
        assert _widget() != _widget()
