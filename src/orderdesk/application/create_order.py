"""Application service: Create Order use case.

Resolves the ids typed at the console into catalog entities and hands
them to the order service, which owns discounting and storage.
"""

from __future__ import annotations

from orderdesk.application.dto import OrderDTO, OrderItemSpec, OrderLineItemDTO
from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.model.order import Order, OrderLine
from orderdesk.domain.model.value_objects import Quantity
from orderdesk.domain.repository.customer_repository import CustomerRepository
from orderdesk.domain.repository.product_repository import ProductRepository
from orderdesk.domain.service.order_service import OrderService


class CreateOrderHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        order_service: OrderService,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._order_service = order_service

    def handle(
        self,
        order_id: int,
        customer_id: int,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Resolve the customer and every product id (fail if not found).
        2. Build OrderLines that reference the catalog products.
        3. Let the order service discount, construct and store the order.
        4. Return a DTO.

        Lookups happen before anything is discounted, so an unknown id
        leaves every product price as it was.
        """
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer #{customer_id} not found")

        lines: list[OrderLine] = []
        for spec in item_specs:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{spec.product_id} not found")
            lines.append(OrderLine(product=product, quantity=Quantity(spec.quantity)))

        order = self._order_service.create_order(
            order_id=order_id, customer=customer, lines=lines
        )
        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer.name,
            items=[
                OrderLineItemDTO(
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    line_total=str(line.subtotal),
                )
                for line in order.lines
            ],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
