"""Product aggregate.

Products live independently of orders. Order lines hold a reference to
the very same Product instance, so a price change made here is seen by
every line that points at it.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Money


def require_text(value: str, field_name: str) -> str:
    """Return ``value`` stripped, or raise if it is blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is strictly positive, before and after any discount
    - ``name`` and ``category`` are non-blank

    Compared by identity: two products with the same fields are still
    distinct catalog entries.
    """

    id: int
    name: str
    price: Money
    category: str

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "Product name")
        self.category = require_text(self.category, "Product category")
        if self.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

    def apply_discount(self, per_unit: Money) -> None:
        """Permanently lower the unit price by ``per_unit``.

        Rejected, leaving the price untouched, when the discount is zero
        or would take the price to zero or below.
        """
        if per_unit.is_zero:
            raise ValidationError("Discount must be greater than zero")
        if per_unit >= self.price:
            raise ValidationError(
                f"Discount {per_unit} is not below the current price "
                f"{self.price} of {self.name}"
            )
        self.price = self.price - per_unit
