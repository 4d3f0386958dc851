"""Money amounts: two decimal places, rounded half-up."""

import decimal

from protean.exceptions import ValidationError

CENT = decimal.Decimal("0.01")


def to_money(value, field: str = "amount") -> decimal.Decimal:
    try:
        return decimal.Decimal(str(value)).quantize(CENT, rounding=decimal.ROUND_HALF_UP)
    except (decimal.InvalidOperation, ValueError):
        raise ValidationError({field: [f"'{value}' is not a valid amount"]}) from None
