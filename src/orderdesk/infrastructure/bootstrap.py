"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.application.add_customer import AddCustomerHandler
from orderdesk.application.add_product import AddProductHandler
from orderdesk.application.create_order import CreateOrderHandler
from orderdesk.application.list_catalog import ListCustomersHandler, ListProductsHandler
from orderdesk.application.order_report import OrderReportHandler
from orderdesk.domain.service.discount_rules import (
    CategoryDiscountRule,
    DiscountRuleSet,
    QuantityDiscountRule,
)
from orderdesk.domain.service.log_sink import LogSink
from orderdesk.domain.service.order_service import OrderService
from orderdesk.infrastructure.config import AppConfig, load_config
from orderdesk.infrastructure.logging_config import LoggingLogSink
from orderdesk.infrastructure.persistence.in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)


@dataclass
class App:
    """One console session: its catalogs and the handlers that use them."""

    products: InMemoryProductRepository
    customers: InMemoryCustomerRepository
    orders: InMemoryOrderRepository
    order_service: OrderService
    add_product: AddProductHandler
    add_customer: AddCustomerHandler
    create_order: CreateOrderHandler
    list_products: ListProductsHandler
    list_customers: ListCustomersHandler
    order_report: OrderReportHandler


def discount_rules(config: AppConfig) -> DiscountRuleSet:
    """The standard policy: category discount and bulk-quantity discount."""
    return DiscountRuleSet([
        CategoryDiscountRule(config.discount_category, config.category_discount_rate),
        QuantityDiscountRule(config.bulk_min_quantity, config.bulk_discount_rate),
    ])


def build_app(config: AppConfig | None = None, log_sink: LogSink | None = None) -> App:
    config = config or load_config()
    products = InMemoryProductRepository()
    customers = InMemoryCustomerRepository()
    orders = InMemoryOrderRepository()
    order_service = OrderService(
        order_repo=orders,
        rules=discount_rules(config),
        log_sink=log_sink or LoggingLogSink(),
    )
    return App(
        products=products,
        customers=customers,
        orders=orders,
        order_service=order_service,
        add_product=AddProductHandler(products),
        add_customer=AddCustomerHandler(customers),
        create_order=CreateOrderHandler(products, customers, order_service),
        list_products=ListProductsHandler(products),
        list_customers=ListCustomersHandler(customers),
        order_report=OrderReportHandler(order_service),
    )
