"""Tests for configuration, logging and the composition root."""

import logging
from decimal import Decimal

import pytest
from rich.logging import RichHandler

from orderdesk.application.dto import OrderItemSpec
from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Money
from orderdesk.infrastructure.bootstrap import build_app
from orderdesk.infrastructure.config import AppConfig, load_config
from orderdesk.infrastructure.logging_config import (
    ORDER_LOGGER_NAME,
    LoggingLogSink,
    configure_logging,
)
from tests.fakes import FakeLogSink


class TestAppConfig:

    def test_defaults(self):
        config = load_config()
        assert config.log_level == "WARNING"
        assert config.discount_category == "Electronics"
        assert config.category_discount_rate == Decimal("0.10")
        assert config.bulk_min_quantity == 5
        assert config.bulk_discount_rate == Decimal("0.15")

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "debug")
        monkeypatch.setenv("ORDERDESK_DISCOUNT_CATEGORY", "Toys")
        monkeypatch.setenv("ORDERDESK_CATEGORY_DISCOUNT_RATE", "0.2")
        monkeypatch.setenv("ORDERDESK_BULK_MIN_QUANTITY", "10")
        monkeypatch.setenv("ORDERDESK_BULK_DISCOUNT_RATE", "0.25")

        config = load_config()

        assert config.log_level == "DEBUG"
        assert config.discount_category == "Toys"
        assert config.category_discount_rate == Decimal("0.2")
        assert config.bulk_min_quantity == 10
        assert config.bulk_discount_rate == Decimal("0.25")

    def test_explicit_override_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "ERROR")
        assert load_config(log_level="INFO").log_level == "INFO"

    def test_bad_decimal_rejected(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_BULK_DISCOUNT_RATE", "lots")
        with pytest.raises(ValidationError, match="ORDERDESK_BULK_DISCOUNT_RATE"):
            load_config()

    @pytest.mark.parametrize("rate", ["NaN", "Infinity", "0", "1", "1.5", "-0.1"])
    def test_out_of_range_rate_rejected(self, monkeypatch, rate):
        monkeypatch.setenv("ORDERDESK_CATEGORY_DISCOUNT_RATE", rate)
        with pytest.raises(ValidationError, match="ORDERDESK_CATEGORY_DISCOUNT_RATE"):
            load_config()

    def test_bad_int_rejected(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_BULK_MIN_QUANTITY", "five")
        with pytest.raises(ValidationError, match="ORDERDESK_BULK_MIN_QUANTITY"):
            load_config()

    def test_zero_min_quantity_rejected(self, monkeypatch):
        monkeypatch.setenv("ORDERDESK_BULK_MIN_QUANTITY", "0")
        with pytest.raises(ValidationError, match="ORDERDESK_BULK_MIN_QUANTITY"):
            load_config()

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError, match="ORDERDESK_LOG_LEVEL"):
            load_config(log_level="chatty")


class TestLoggingLogSink:

    def test_records_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger=ORDER_LOGGER_NAME):
            LoggingLogSink().record("Order #1 created")
        assert caplog.records[-1].name == ORDER_LOGGER_NAME
        assert caplog.records[-1].levelno == logging.INFO
        assert caplog.records[-1].getMessage() == "Order #1 created"


class TestConfigureLogging:

    def test_installs_rich_handler_on_stderr(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("info")

        (kwargs,) = calls
        assert kwargs["level"] == logging.INFO
        (handler,) = kwargs["handlers"]
        assert isinstance(handler, RichHandler)
        assert handler.console.stderr
        assert logging.getLogger("orderdesk").level == logging.INFO


class TestBuildApp:

    def test_config_drives_discount_policy(self):
        sink = FakeLogSink()
        app = build_app(AppConfig(discount_category="Toys"), log_sink=sink)
        app.add_product.handle(1, "Robot", "50.00", "toys")
        app.add_product.handle(2, "Radio", "50.00", "Electronics")
        app.add_customer.handle(1, "Ada", "ada@example.com", "T-1")

        app.create_order.handle(1, 1, [OrderItemSpec(1, 1), OrderItemSpec(2, 1)])

        assert app.products.get_by_id(1).price == Money.of("45.00")
        assert app.products.get_by_id(2).price == Money.of("50.00")
        assert sink.messages == ["Order #1 created for Ada, total $95.00 (1 of 2 lines discounted)"]
