"""Abstract catalog of Customer entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Append a customer. Id uniqueness is the caller's responsibility."""

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return the first customer with this ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer in insertion order."""
