"""Application services: catalog listing queries."""

from __future__ import annotations

from orderdesk.application.dto import CustomerDTO, ProductDTO
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository


def next_id(
    catalog: ProductRepository | CustomerRepository | OrderRepository,
) -> int:
    """Suggested id for the next entity: one past the highest in use."""
    ids = [entity.id for entity in catalog.list_all()]
    return max(ids) + 1 if ids else 1


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                id=p.id,
                name=p.name,
                price=str(p.price),
                category=p.category,
            )
            for p in self._product_repo.list_all()
        ]


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return [
            CustomerDTO(id=c.id, name=c.name, email=c.email, tax_id=c.tax_id)
            for c in self._customer_repo.list_all()
        ]
