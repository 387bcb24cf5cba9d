"""click parameter types for console input."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click


class PositiveDecimal(click.ParamType):
    name = "amount"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        if not amount.is_finite() or amount <= 0:
            self.fail(f"{value!r} must be greater than zero", param, ctx)
        return amount


class NonBlankText(click.ParamType):
    name = "text"

    def convert(self, value, param, ctx) -> str:
        text = str(value).strip()
        if not text:
            self.fail("a value is required", param, ctx)
        return text


POSITIVE_DECIMAL = PositiveDecimal()
NON_BLANK = NonBlankText()
POSITIVE_INT = click.IntRange(min=1)
