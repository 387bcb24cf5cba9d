"""Logging setup and the stdlib-backed log sink."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ORDER_LOGGER_NAME = "orderdesk.orders"


class LoggingLogSink:
    """Forwards order-service records to a ``logging.Logger`` at INFO."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(ORDER_LOGGER_NAME)

    def record(self, message: str) -> None:
        self._logger.info(message)


def configure_logging(level: str) -> None:
    # stderr, so log lines never interleave with menu output on stdout
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )
    logging.getLogger("orderdesk").setLevel(level.upper())
