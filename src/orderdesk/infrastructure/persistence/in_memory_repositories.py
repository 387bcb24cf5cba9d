"""In-memory implementations of the domain catalogs.

Everything lives for the lifetime of the process only.
"""

from __future__ import annotations

from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import Product
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository
from orderdesk.infrastructure.persistence.in_memory_catalog import InMemoryCatalog


class InMemoryProductRepository(InMemoryCatalog[Product], ProductRepository):
    pass


class InMemoryCustomerRepository(InMemoryCatalog[Customer], CustomerRepository):
    pass


class InMemoryOrderRepository(InMemoryCatalog[Order], OrderRepository):
    pass
