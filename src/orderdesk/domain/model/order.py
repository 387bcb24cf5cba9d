"""Order aggregate and its line items.

Lines hold *live* references to catalog products: subtotals and totals are
recomputed from the current product price on every read, never cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from orderdesk.domain.exceptions import PreconditionFailedError
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """One product + quantity entry within an order.

    The product is shared, not owned: other lines, in this order or in
    others, may point at the same instance.
    """

    product: Product
    quantity: Quantity

    @property
    def unit_price(self) -> Money:
        return self.product.price

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. It checks the
    preconditions; nothing about an Order changes after construction.
    """

    id: int
    customer: Customer
    lines: tuple[OrderLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        order_id: int,
        customer: Customer | None,
        lines: list[OrderLine] | tuple[OrderLine, ...],
    ) -> Order:
        """Create a new order, enforcing all preconditions."""
        if customer is None:
            raise PreconditionFailedError("An order requires a customer")
        if not lines:
            raise PreconditionFailedError("Order must contain at least one item")
        return Order(id=order_id, customer=customer, lines=tuple(lines))

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result
