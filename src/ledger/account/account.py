"""CapitalAccount aggregate: a monetary balance owned by an administrator."""

import decimal
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, Identifier

from shared.domain import shelfwise
from shared.money import to_money


@shelfwise.aggregate
class CapitalAccount:
    owner_user_id = Identifier()
    balance = Decimal(required=True, precision=12, scale=2, min_value=0, default=decimal.Decimal("0.00"))
    opened_at = DateTime()

    @classmethod
    def open(cls, owner_user_id=None, opening_balance=decimal.Decimal("0.00")):
        opening_balance = to_money(opening_balance, "opening_balance")
        if opening_balance < 0:
            raise ValidationError({"opening_balance": ["Opening balance cannot be negative"]})
        return cls(
            owner_user_id=owner_user_id,
            balance=opening_balance,
            opened_at=datetime.now(UTC),
        )

    def credit(self, amount) -> None:
        amount = to_money(amount)
        if amount < 0:
            raise ValidationError({"amount": ["Amount to add cannot be negative"]})
        self.balance = to_money(self.balance) + amount

    def debit(self, amount) -> None:
        amount = to_money(amount)
        if amount < 0:
            raise ValidationError({"amount": ["Amount to decrease cannot be negative"]})
        balance = to_money(self.balance)
        if balance < amount:
            raise ValidationError({"balance": [f"Insufficient capital. Available: {balance}, Requested: {amount}"]})
        self.balance = balance - amount
