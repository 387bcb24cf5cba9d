"""Runtime configuration.

Defaults reproduce the standard discount policy; every field can be
overridden through an ``ORDERDESK_*`` environment variable.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

import pydantic
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orderdesk.domain.exceptions import ValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """orderdesk settings, read from the environment."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING"
    )

    # Discount policy
    discount_category: str = Field(default="Electronics", min_length=1)
    category_discount_rate: Decimal = Field(default=Decimal("0.10"), gt=0, lt=1)
    bulk_min_quantity: int = Field(default=5, ge=1)
    bulk_discount_rate: Decimal = Field(default=Decimal("0.15"), gt=0, lt=1)

    model_config = SettingsConfigDict(
        env_prefix="ORDERDESK_",
        frozen=True,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_config(**overrides: Any) -> AppConfig:
    """Build the settings; explicit overrides win over the environment.

    Raises the domain ValidationError so callers handle bad settings the
    same way as any other rejected input.
    """
    try:
        return AppConfig(**overrides)
    except pydantic.ValidationError as exc:
        problems = "; ".join(
            f"ORDERDESK_{'.'.join(str(part) for part in err['loc']).upper()}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValidationError(f"Invalid configuration: {problems}") from exc
