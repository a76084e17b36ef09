"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money, ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        products = self._load()
        products[product.id.value] = product
        self._persist(products)
        logger.debug("Saved product %s to %s", product.id, self._file_path)
        return product

    def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._load().get(product_id.value)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def list_by_name_containing(self, text: str) -> list[Product]:
        needle = text.strip().lower()
        return [p for p in self._load().values() if needle in p.name.lower()]

    def list_active(self) -> list[Product]:
        return [p for p in self._load().values() if p.is_active()]

    def exists(self, product_id: ProductId) -> bool:
        return product_id.value in self._load()

    def delete(self, product_id: ProductId) -> None:
        products = self._load()
        if products.pop(product_id.value, None) is not None:
            self._persist(products)
            logger.debug("Deleted product %s from %s", product_id, self._file_path)

    def count(self) -> int:
        return len(self._load())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (self._to_domain(item) for item in raw)
        return {p.id.value: p for p in products}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_domain(item: dict[str, Any]) -> Product:
        return Product(
            id=ProductId.of(item["id"]),
            name=item["name"],
            description=item.get("description"),
            price=Money(Decimal(item["price"]), item["currency"]),
            stock_quantity=item["stock_quantity"],
            status=ProductStatus(item["status"]),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=(
                datetime.fromisoformat(item["updated_at"])
                if item.get("updated_at")
                else None
            ),
        )

    @staticmethod
    def _to_raw(product: Product) -> dict[str, Any]:
        return {
            "id": product.id.value,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
            "status": product.status.value,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
