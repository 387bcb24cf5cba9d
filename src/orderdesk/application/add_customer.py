"""Application service: Add Customer use case."""

from __future__ import annotations

from orderdesk.domain.model.customer import Customer
from orderdesk.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int, name: str, email: str, tax_id: str) -> Customer:
        customer = Customer(id=customer_id, name=name, email=email, tax_id=tax_id)
        self._customer_repo.add(customer)
        return customer
