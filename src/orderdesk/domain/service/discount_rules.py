"""Discount rules.

Each rule looks at one order line and proposes how much it alone would
take off the line subtotal. Rules never combine: the rule set picks the
largest proposal, so at most one discount policy applies per line.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.order import OrderLine
from orderdesk.domain.model.value_objects import Money


def _check_rate(rate: Decimal) -> Decimal:
    if (
        not isinstance(rate, Decimal)
        or not rate.is_finite()
        or not (Decimal("0") < rate < Decimal("1"))
    ):
        raise ValidationError(f"Discount rate must be between 0 and 1, got {rate}")
    return rate


class DiscountRule(ABC):
    """A pure evaluator producing a candidate discount for one line."""

    @abstractmethod
    def evaluate(self, category: str, quantity: int, unit_price: Money) -> Money:
        """Return the amount (>= 0) to deduct from ``unit_price * quantity``."""


class CategoryDiscountRule(DiscountRule):
    """Percentage off every line whose product is in a given category."""

    def __init__(
        self,
        category: str = "Electronics",
        rate: Decimal = Decimal("0.10"),
    ) -> None:
        if not category or not category.strip():
            raise ValidationError("Discount category is required")
        self._category = category.strip().casefold()
        self._rate = _check_rate(rate)

    def evaluate(self, category: str, quantity: int, unit_price: Money) -> Money:
        if category.strip().casefold() != self._category:
            return Money.zero()
        return (unit_price * quantity).percent(self._rate)


class QuantityDiscountRule(DiscountRule):
    """Percentage off lines ordering at least ``min_quantity`` units."""

    def __init__(
        self,
        min_quantity: int = 5,
        rate: Decimal = Decimal("0.15"),
    ) -> None:
        if min_quantity < 1:
            raise ValidationError("Minimum quantity must be at least 1")
        self._min_quantity = min_quantity
        self._rate = _check_rate(rate)

    def evaluate(self, category: str, quantity: int, unit_price: Money) -> Money:
        if quantity < self._min_quantity:
            return Money.zero()
        return (unit_price * quantity).percent(self._rate)


class DiscountRuleSet:
    """Ordered, extendable collection of rules reduced by maximum."""

    def __init__(self, rules: list[DiscountRule] | None = None) -> None:
        self._rules: list[DiscountRule] = list(rules or [])

    def add(self, rule: DiscountRule) -> None:
        self._rules.append(rule)

    @property
    def rules(self) -> list[DiscountRule]:
        return list(self._rules)

    def best_discount(self, line: OrderLine) -> Money:
        """Largest amount any single rule proposes for ``line``."""
        best = Money.zero()
        for rule in self._rules:
            candidate = rule.evaluate(
                line.product.category, line.quantity.value, line.unit_price
            )
            if candidate > best:
                best = candidate
        return best
