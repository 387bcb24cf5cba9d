"""Tests for the catalog use cases: adding, listing and the report query."""

from decimal import Decimal

import pytest

from orderdesk.application.add_customer import AddCustomerHandler
from orderdesk.application.add_product import AddProductHandler
from orderdesk.application.list_catalog import (
    ListCustomersHandler,
    ListProductsHandler,
    next_id,
)
from orderdesk.application.order_report import OrderReportHandler
from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.service.discount_rules import DiscountRuleSet
from orderdesk.domain.service.order_service import OrderService
from orderdesk.infrastructure.persistence.in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from tests.fakes import FakeLogSink


class TestAddProduct:

    def test_adds_product(self):
        repo = InMemoryProductRepository()
        product = AddProductHandler(repo).handle(4, "Laptop", "999.90", "Electronics")
        assert repo.get_by_id(4) is product
        assert product.price == Money.of("999.90")

    def test_accepts_decimal_price(self):
        repo = InMemoryProductRepository()
        product = AddProductHandler(repo).handle(1, "Pen", Decimal("1.25"), "Office")
        assert product.price == Money.of("1.25")

    def test_invalid_product_not_stored(self):
        repo = InMemoryProductRepository()
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle(1, "Pen", "-1", "Office")
        assert repo.list_all() == []

    def test_duplicate_ids_are_not_checked(self):
        repo = InMemoryProductRepository()
        handler = AddProductHandler(repo)
        first = handler.handle(1, "Pen", "1.00", "Office")
        handler.handle(1, "Pencil", "0.50", "Office")
        assert len(repo.list_all()) == 2
        assert repo.get_by_id(1) is first


class TestAddCustomer:

    def test_adds_customer(self):
        repo = InMemoryCustomerRepository()
        customer = AddCustomerHandler(repo).handle(1, "Ada", "ada@example.com", "T-1")
        assert repo.list_all() == [customer]

    def test_blank_email_rejected(self):
        repo = InMemoryCustomerRepository()
        with pytest.raises(ValidationError, match="email"):
            AddCustomerHandler(repo).handle(1, "Ada", "", "T-1")
        assert repo.list_all() == []


class TestListings:

    def test_products_listed_in_insertion_order(self):
        repo = InMemoryProductRepository()
        add = AddProductHandler(repo)
        add.handle(2, "Novel", "20", "Books")
        add.handle(1, "Laptop", "100", "Electronics")

        dtos = ListProductsHandler(repo).handle()

        assert [d.name for d in dtos] == ["Novel", "Laptop"]
        assert dtos[0].price == "$20.00"

    def test_customers_listed(self):
        repo = InMemoryCustomerRepository()
        AddCustomerHandler(repo).handle(1, "Ada", "ada@example.com", "T-1")
        (dto,) = ListCustomersHandler(repo).handle()
        assert (dto.id, dto.name, dto.email, dto.tax_id) == (1, "Ada", "ada@example.com", "T-1")

    def test_next_id(self):
        repo = InMemoryProductRepository()
        assert next_id(repo) == 1
        AddProductHandler(repo).handle(7, "Pen", "1", "Office")
        assert next_id(repo) == 8


class TestOrderReport:

    def test_empty_report(self):
        service = OrderService(InMemoryOrderRepository(), DiscountRuleSet(), FakeLogSink())
        report = OrderReportHandler(service).handle()
        assert report.lines() == ["No orders recorded."]
