"""Abstract catalog of Order aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append an order. Id uniqueness is the caller's responsibility."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return the first order with this ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in insertion order."""
