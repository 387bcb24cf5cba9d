"""Application service: Order Report use case (query)."""

from __future__ import annotations

from orderdesk.domain.service.order_service import OrderReport, OrderService


class OrderReportHandler:

    def __init__(self, order_service: OrderService) -> None:
        self._order_service = order_service

    def handle(self) -> OrderReport:
        return self._order_service.report()
