"""Domain service: discounting, order creation and order history.

Discount application is a read-modify-write on shared Product instances.
It runs before the Order is built and is not rolled back if a later step
of the same call fails: the caller discards the attempt, while the product
keeps its reduced price.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from orderdesk.domain.exceptions import PreconditionFailedError
from orderdesk.domain.model.customer import Customer
from orderdesk.domain.model.order import Order, OrderLine
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.service.discount_rules import DiscountRuleSet
from orderdesk.domain.service.log_sink import LogSink

logger = logging.getLogger(__name__)

NO_ORDERS_MESSAGE = "No orders recorded."


@dataclass(frozen=True)
class AppliedDiscount:
    product_id: int
    total: Money
    per_unit: Money


@dataclass(frozen=True)
class OrderLineSummary:
    product_name: str
    quantity: int
    unit_price: Money
    subtotal: Money


@dataclass(frozen=True)
class OrderSummary:
    order_id: int
    customer_name: str
    total: Money
    created_at: datetime
    lines: tuple[OrderLineSummary, ...]


@dataclass(frozen=True)
class OrderReport:
    """Order history, oldest first."""

    orders: tuple[OrderSummary, ...]

    @property
    def is_empty(self) -> bool:
        return not self.orders

    def lines(self) -> list[str]:
        """Render as text, one string per output line."""
        if self.is_empty:
            return [NO_ORDERS_MESSAGE]

        out: list[str] = []
        for summary in self.orders:
            out.append(
                f"Order #{summary.order_id}  customer={summary.customer_name}  "
                f"total={summary.total}  "
                f"created={summary.created_at.strftime('%Y-%m-%d %H:%M UTC')}"
            )
            for line in summary.lines:
                out.append(
                    f"  {line.product_name:<20} {line.quantity:>5} "
                    f"{str(line.unit_price):>10} {str(line.subtotal):>10}"
                )
        return out


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        rules: DiscountRuleSet,
        log_sink: LogSink,
    ) -> None:
        self._order_repo = order_repo
        self._rules = rules
        self._log_sink = log_sink

    def apply_discounts(self, lines: list[OrderLine]) -> list[AppliedDiscount]:
        """Apply the best rule to each line's product, permanently.

        For every line the largest candidate discount is turned into a
        per-unit reduction of the referenced product's price. Lines no
        rule fires for are left untouched.
        """
        applied: list[AppliedDiscount] = []
        for line in lines:
            best = self._rules.best_discount(line)
            if best.is_zero:
                continue
            per_unit = best.split(line.quantity.value)
            line.product.apply_discount(per_unit)
            logger.debug(
                "Discounted product #%s by %s per unit (line discount %s)",
                line.product.id,
                per_unit,
                best,
            )
            applied.append(
                AppliedDiscount(product_id=line.product.id, total=best, per_unit=per_unit)
            )
        return applied

    def create_order(
        self,
        order_id: int,
        customer: Customer | None,
        lines: list[OrderLine],
    ) -> Order:
        """Discount, build and store a new order.

        Preconditions are checked before any product is touched.
        """
        if customer is None:
            raise PreconditionFailedError("An order requires a customer")
        if not lines:
            raise PreconditionFailedError("Order must contain at least one item")

        applied = self.apply_discounts(lines)
        order = Order.create(order_id=order_id, customer=customer, lines=lines)
        self._order_repo.add(order)

        self._log_sink.record(
            f"Order #{order.id} created for {customer.name}, total {order.total} "
            f"({len(applied)} of {len(order.lines)} lines discounted)"
        )
        return order

    def report(self) -> OrderReport:
        """Summaries of every stored order, in insertion order."""
        return OrderReport(
            orders=tuple(
                OrderSummary(
                    order_id=order.id,
                    customer_name=order.customer.name,
                    total=order.total,
                    created_at=order.created_at,
                    lines=tuple(
                        OrderLineSummary(
                            product_name=line.product.name,
                            quantity=line.quantity.value,
                            unit_price=line.unit_price,
                            subtotal=line.subtotal,
                        )
                        for line in order.lines
                    ),
                )
                for order in self._order_repo.list_all()
            )
        )
