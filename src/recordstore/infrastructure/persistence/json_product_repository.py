"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from recordstore.domain.model.product import Product
from recordstore.domain.repository.product_repository import ProductRepository
from recordstore.infrastructure.persistence.json_file import JsonTable


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._table = JsonTable(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        raw = self._table.find("id", product_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._table.load()]
        return sorted(products, key=lambda p: p.id)

    def save(self, product: Product) -> None:
        if product.id == 0:
            product.id = self._table.next_id()
        self._table.upsert("id", self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "stock": product.stock,
            "owner": product.owner,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        # is_available is derived from stock in Product.__post_init__
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=raw["price"],
            stock=raw["stock"],
            owner=raw.get("owner", ""),
        )
