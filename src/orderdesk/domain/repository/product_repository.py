"""Abstract catalog of Product aggregates.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a product. Id uniqueness is the caller's responsibility."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return the first product with this ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""
