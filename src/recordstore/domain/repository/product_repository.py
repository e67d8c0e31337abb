"""Abstract repository for Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordstore.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a product. A product with ``id == 0`` is assigned the next ID."""
