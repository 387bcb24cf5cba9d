"""Port for the audit trail written by the order service."""

from __future__ import annotations

from typing import Protocol


class LogSink(Protocol):

    def record(self, message: str) -> None:
        """Record one human-readable message."""
