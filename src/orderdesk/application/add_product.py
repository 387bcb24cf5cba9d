"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | Decimal,
        category: str,
    ) -> Product:
        """Register a product in the catalog.

        The id is taken as given; the catalog does not check for duplicates.
        """
        product = Product(
            id=product_id,
            name=name,
            price=Money.of(price),
            category=category,
        )
        self._product_repo.add(product)
        return product
